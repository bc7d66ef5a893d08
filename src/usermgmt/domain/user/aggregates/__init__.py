from usermgmt.domain.user.aggregates.user import User

__all__ = ["User"]
