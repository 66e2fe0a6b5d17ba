from app.chat.service import ChatReply, DiagramChatService, extract_transcript_diagrams

__all__ = ["ChatReply", "DiagramChatService", "extract_transcript_diagrams"]
