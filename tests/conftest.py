"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Icon-style SVGs: declared viewBox, fixed size, stroke inherited from the root

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''


# Tracer-style SVGs: no viewBox, no ids, fills only

SINGLE_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="10" width="20" height="30" fill="#4ECDC4"/>
</svg>'''

TRACED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Generator: tracer 1.0 -->
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <metadata><rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"/></metadata>
  <title></title>
  <g>
    <path d="M10 10 L90 10 L90 90 Z" fill="#FF6B6B"/>
  </g>
  <g id="eyes" fill="#2D3436">
    <circle cx="40" cy="40" r="5"/>
    <circle cx="60" cy="40" r="5"/>
  </g>
</svg>'''

# Stroked paths with known estimated lengths: 20 (polyline) and 12 (flat cubic)
STROKED_PATHS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path id="zigzag" d="M0,0 L10,0 L10,10" stroke="#000" stroke-width="2" fill="none"/>
  <path id="curve" d="M0,0 C0,0 10,0 10,0" style="stroke: #f00; fill: none"/>
  <path id="filled" d="M0,0 L5,5 L0,5 Z" fill="#0f0"/>
</svg>'''

FILLED_COMPLEX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <path d="M128 50 L200 100 L200 180 L128 220 L56 180 L56 100 Z" fill="#45B7D1"/>
  <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
  <circle cx="100" cy="110" r="10" fill="#FFEAA7"/>
  <circle cx="156" cy="110" r="10" fill="#FFEAA7"/>
</svg>'''


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def single_rect_svg() -> str:
    return SINGLE_RECT_SVG


@pytest.fixture
def traced_svg() -> str:
    return TRACED_SVG


@pytest.fixture
def stroked_paths_svg() -> str:
    return STROKED_PATHS_SVG


@pytest.fixture
def filled_complex_svg() -> str:
    return FILLED_COMPLEX_SVG
