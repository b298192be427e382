"""Shared test fixtures."""

from __future__ import annotations

import pytest

from icon_normalizer import RawIcon


MONOCHROME_SVG = '<svg viewBox="0 0 24 24"><path fill="#000" d="M0 0"/><path stroke="#fff" d="M1 1"/></svg>'

COLORED_SVG = '<svg viewBox="0 0 24 24"><path fill="#ff0000" d="M0 0"/><path stroke="#fff" d="M1 1"/></svg>'

STROKE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

DEFS_SVG = '''<svg viewBox="0 0 32 32">
  <defs>
    <clipPath id="a"><rect width="32" height="32" fill="#3366ff"/></clipPath>
  </defs>
  <g clip-path="url(#a)">
    <path fill="#000000" d="M0 0h32v32H0z"/>
    <circle fill="white" cx="16" cy="16" r="4"/>
  </g>
</svg>'''

FLAG_SVG = '''<svg viewBox="0 0 24 24">
  <rect fill="#002395" width="8" height="24"/>
  <rect fill="#fff" x="8" width="8" height="24"/>
  <rect fill="#ed2939" x="16" width="8" height="24" stroke="#000" stroke-width="0.5"/>
</svg>'''

HYBRID_SVG = '''<svg viewBox="0 0 24 24" fill="none">
  <path stroke="#111" stroke-width="1.5" d="M2 2h20"/>
  <path fill="#111" d="M4 4h16v16H4z"/>
  <circle fill="#111" stroke="#111" cx="12" cy="12" r="2"/>
</svg>'''

GROUP_SVG = '''<svg viewBox="0 0 24 24">
  <g fill="#000">
    <path d="M0 0"/>
    <path fill="#fff" d="M1 1"/>
  </g>
</svg>'''


@pytest.fixture
def raw_icon():
    """Build a RawIcon from a name and markup."""

    def _make(name: str, markup: str) -> RawIcon:
        return RawIcon(name=name, source_markup=markup)

    return _make
