from .auth_views import *
from .user_views import *
