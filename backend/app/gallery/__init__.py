from app.gallery.loader import GALLERY_PATH, DiagramGallery, load_gallery

__all__ = ["GALLERY_PATH", "DiagramGallery", "load_gallery"]
