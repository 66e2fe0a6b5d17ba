"""Tests for the sample diagram gallery"""

from app.extraction import extract_code
from app.gallery import load_gallery
from app.intent import detect_diagram_request
from app.ir.diagram import DiagramType


def test_gallery_has_one_sample_per_family():
    gallery = load_gallery()
    assert set(gallery.diagrams) == set(DiagramType) - {DiagramType.GENERIC}


def test_samples_are_extractable_from_untagged_fences():
    for diagram_type, source in load_gallery().diagrams.items():
        assert extract_code(f"```\n{source}\n```") == source, diagram_type


def test_example_prompts_are_diagram_requests():
    prompts = load_gallery().prompts
    assert "Create a flowchart for my morning routine" in prompts
    for prompt in prompts:
        assert detect_diagram_request(prompt) is not None, prompt


def test_example_prompts_resolve_to_expected_families():
    families = [detect_diagram_request(p).type for p in load_gallery().prompts]
    assert families == [
        DiagramType.FLOWCHART,
        DiagramType.MINDMAP,
        DiagramType.SEQUENCE,
        DiagramType.CLASS,
        DiagramType.GANTT,
    ]


def test_unknown_types_are_skipped(tmp_path):
    path = tmp_path / "gallery.yaml"
    path.write_text("diagrams:\n  pie: |\n    pie\n  gantt: gantt\nprompts: []\n")

    gallery = load_gallery(path)
    assert gallery.diagrams == {DiagramType.GANTT: "gantt"}
    assert gallery.to_dict() == {"diagrams": {"gantt": "gantt"}, "prompts": []}
