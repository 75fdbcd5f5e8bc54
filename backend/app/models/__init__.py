from app.models.product import Product
from app.models.sale import Sale
from app.models.user import User, Role, Status

__all__ = ["Product", "Sale", "User", "Role", "Status"]
