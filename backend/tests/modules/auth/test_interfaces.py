from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define the account operations."""
        for method in ["signup", "login", "get_user", "get_status", "update_status"]:
            assert hasattr(IAuthService, method)

    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IAuthService methods."""
        for method in ["signup", "login", "get_user", "get_status", "update_status"]:
            assert callable(getattr(AuthService, method))

    def test_service_satisfies_protocol(self, test_settings):
        from unittest.mock import MagicMock
        from modules.auth.credentials import CredentialService

        service = AuthService(repository=MagicMock(), credentials=CredentialService(test_settings))
        assert isinstance(service, IAuthService)
