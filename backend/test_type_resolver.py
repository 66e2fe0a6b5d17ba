"""Tests for diagram family resolution"""

import pytest

from app.intent import PATTERN_TABLE, PatternGroup, TypeResolver, family_order, resolve_type
from app.ir.diagram import DiagramType


def test_pattern_table_order_is_fixed():
    assert family_order() == (
        DiagramType.FLOWCHART,
        DiagramType.MINDMAP,
        DiagramType.SEQUENCE,
        DiagramType.CLASS,
        DiagramType.GANTT,
    )
    assert isinstance(PATTERN_TABLE, tuple)


@pytest.mark.parametrize("text, expected", [
    ("Create a flowchart for my morning routine", DiagramType.FLOWCHART),
    ("map our deployment workflow", DiagramType.FLOWCHART),
    ("Draw a mindmap of web development skills", DiagramType.MINDMAP),
    ("let's BRAINSTORM product names", DiagramType.MINDMAP),
    ("Show me a sequence diagram for user authentication", DiagramType.SEQUENCE),
    ("Generate a class diagram for a blog system", DiagramType.CLASS),
    ("a UML view of the order aggregate", DiagramType.CLASS),
    ("Create a gantt chart for a 3-month project", DiagramType.GANTT),
    ("chart the release milestone dates", DiagramType.GANTT),
    ("Draw a diagram of my house", DiagramType.GENERIC),
])
def test_resolves_family(text, expected):
    assert resolve_type(text) == expected


def test_earliest_declared_family_wins_regardless_of_position():
    assert resolve_type("a gantt chart and a flow chart") == DiagramType.FLOWCHART
    assert resolve_type("a flow chart and a gantt chart") == DiagramType.FLOWCHART


def test_shared_phrase_goes_to_earlier_family():
    # "project timeline" contains "timeline", which sequence declares first
    assert resolve_type("Build a project timeline") == DiagramType.SEQUENCE


def test_mindmap_beats_gantt():
    assert resolve_type("draw a mind map of my project schedule") == DiagramType.MINDMAP


def test_custom_table_order_is_respected():
    resolver = TypeResolver(table=[
        PatternGroup(DiagramType.GANTT, ("gantt",)),
        PatternGroup(DiagramType.FLOWCHART, ("flow chart",)),
    ])
    assert resolver.resolve("a flow chart and a gantt") == DiagramType.GANTT


def test_empty_text_is_generic():
    assert resolve_type("") == DiagramType.GENERIC
