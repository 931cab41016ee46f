from app.models.people import Person

__all__ = ["Person"]
