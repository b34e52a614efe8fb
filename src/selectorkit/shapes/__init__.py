from selectorkit.shapes.rectangle import Rectangle

__all__ = ["Rectangle"]
