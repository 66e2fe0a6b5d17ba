import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from app.ir.diagram import DiagramType

logger = logging.getLogger(__name__)

GALLERY_PATH = Path(__file__).resolve().parent / "examples.yaml"


@dataclass
class DiagramGallery:
    diagrams: Dict[DiagramType, str] = field(default_factory=dict)
    prompts: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "diagrams": {t.value: source for t, source in self.diagrams.items()},
            "prompts": list(self.prompts),
        }


def load_gallery(path: Optional[Path] = None) -> DiagramGallery:
    """Load sample diagrams and example prompts from YAML."""
    gallery_path = Path(path) if path else GALLERY_PATH

    with open(gallery_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    diagrams: Dict[DiagramType, str] = {}
    for name, source in (data.get("diagrams") or {}).items():
        try:
            diagram_type = DiagramType(name)
        except ValueError:
            logger.warning("[Gallery] Skipping unknown diagram type: %s", name)
            continue
        diagrams[diagram_type] = str(source).strip()

    prompts = [str(p) for p in (data.get("prompts") or [])]

    logger.debug(
        "[Gallery] Loaded %d diagrams, %d prompts from %s",
        len(diagrams), len(prompts), gallery_path,
    )
    return DiagramGallery(diagrams=diagrams, prompts=prompts)
