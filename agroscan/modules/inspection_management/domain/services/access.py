# 📄 File: agroscan/modules/inspection_management/domain/services/access.py
# 🧭 Purpose (Layman Explanation):
# The one rule every inspection feature shares: only the farmer who owns an inspection,
# or an admin, may look at or change it and the photos and results attached to it.
# 🧪 Purpose (Technical Summary):
# Ownership guard applied after existence checks by the inspection, image and analysis services.
# 🔗 Dependencies:
# agroscan.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# inspection_service.py, inspection_image_service.py, inspection_analysis_service.py

import logging

from agroscan.shared.core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def ensure_inspection_access(inspection, user_id: int, is_admin: bool, action: str) -> None:
    """
    Allow the inspection owner or an Admin, reject everybody else.

    Args:
        inspection: Loaded inspection entity
        user_id: Acting user
        is_admin: Whether the acting user holds the Admin role
        action: Verb used in the rejection message ("update", "delete", ...)

    Raises:
        AuthorizationError: If the caller is neither the owner nor an Admin
    """
    if is_admin or inspection.user_id == user_id:
        return

    logger.warning(f"User {user_id} denied {action} on inspection {inspection.id}")
    raise AuthorizationError(
        f"You can only {action} your own inspections",
        resource_type="inspection",
        resource_id=inspection.id,
        user_id=user_id,
    )
