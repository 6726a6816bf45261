from storefront_api.core.application.usecases.identity.login_usecase import LoginResult, LoginUseCase
from storefront_api.core.application.usecases.identity.promote_user_usecase import PromoteUserUseCase
from storefront_api.core.application.usecases.identity.register_user_usecase import RegisterUserUseCase

__all__ = ["LoginResult", "LoginUseCase", "PromoteUserUseCase", "RegisterUserUseCase"]
