from usermgmt.application.services.user_service import UserService

__all__ = ["UserService"]
