from abc import ABC, abstractmethod
from typing import List, Dict, Optional

class LLMClient(ABC):
    model: str

    @abstractmethod
    def generate(self, messages: List[Dict], system: Optional[str] = None) -> str:
        """Generate assistant text from chat messages"""
        pass
