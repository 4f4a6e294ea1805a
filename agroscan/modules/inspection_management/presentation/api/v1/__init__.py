# 📄 File: agroscan/modules/inspection_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the inspection, photo and analysis endpoints
# 🧪 Purpose (Technical Summary):
# API version 1 package for inspection management routers
# 🔗 Dependencies:
# inspections, inspection_images, inspection_analyses
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router

from .inspection_analyses import inspection_analyses_router
from .inspection_images import inspection_images_router
from .inspections import inspections_router

__all__ = ["inspection_analyses_router", "inspection_images_router", "inspections_router"]
