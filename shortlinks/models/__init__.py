from shortlinks.models.link_model import LinkModel, LinkStatus, CreateLinkRequest, LinkUpdate, CreatedLink
from shortlinks.models.user_model import UserModel, AuthResult
from shortlinks.models.access_model import AccessCheck
from shortlinks.models.dashboard_model import DashboardStats


__all__ = [
    'LinkModel',
    'LinkStatus',
    'CreateLinkRequest',
    'LinkUpdate',
    'CreatedLink',
    'UserModel',
    'AuthResult',
    'AccessCheck',
    'DashboardStats',
]
