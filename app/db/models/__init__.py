from app.db.models.policy import Policy, PolicyLineOfBusiness

__all__ = ["Policy", "PolicyLineOfBusiness"]
