"""
Instruction templates for diagram generation.

Every template ends with the fence contract: the reply must open with a
```mermaid block. The code extractor's primary path relies on it.
"""

from app.ir.diagram import DiagramType

DIAGRAM_LANGUAGE = "mermaid"

BASE_PROMPT = "Create a Mermaid diagram for: {description}"

TYPE_TEMPLATES = {
    DiagramType.FLOWCHART: """{base}

Generate a Mermaid flowchart that shows the process, decision points, and flow. Use proper flowchart syntax with nodes, arrows, and decision diamonds. Make it clear and easy to follow.

Format: Start with ```mermaid and use flowchart TD syntax.""",

    DiagramType.MINDMAP: """{base}

Generate a Mermaid mindmap that organizes the concepts hierarchically. Use the mindmap syntax to show relationships between ideas and subtopics.

Format: Start with ```mermaid and use mindmap syntax.""",

    DiagramType.SEQUENCE: """{base}

Generate a Mermaid sequence diagram showing the interactions, participants, and message flow over time.

Format: Start with ```mermaid and use sequenceDiagram syntax.""",

    DiagramType.CLASS: """{base}

Generate a Mermaid class diagram showing the classes, relationships, and structure.

Format: Start with ```mermaid and use classDiagram syntax.""",

    DiagramType.GANTT: """{base}

Generate a Mermaid Gantt chart showing tasks, timelines, and dependencies.

Format: Start with ```mermaid and use gantt syntax.""",

    DiagramType.GENERIC: """{base}

Choose the most appropriate Mermaid diagram type (flowchart, mindmap, sequence, class, or gantt) and generate a clear, well-structured diagram.

Format: Start with ```mermaid and use the appropriate syntax.""",
}

_missing = [t.value for t in DiagramType if t not in TYPE_TEMPLATES]
if _missing:
    raise RuntimeError(f"No prompt template for diagram types: {', '.join(_missing)}")


CHAT_SYSTEM_PROMPT = """You are a helpful AI assistant for Capture, a personal knowledge management app.

Your role is to help users:
- Capture and organize their thoughts and ideas
- Develop concepts through conversation
- Analyze and summarize content they share
- Generate diagrams when requested (use Mermaid syntax in a ```mermaid code block)
- Connect related ideas and concepts

Be conversational, insightful, and help users think through their ideas clearly."""
