from villa_api.db.models.villa import Villa

__all__ = ["Villa"]
