from .database import Database, translate_db_errors
from .models import PostRecord, UserRecord

__all__ = ["Database", "PostRecord", "UserRecord", "translate_db_errors"]
