"""
API Module
---------
Serves the campground pages using FastAPI and Jinja2 templates.
Features include:
- Listing, viewing, creating, editing and deleting campgrounds
- Validating submitted campground data before it is stored
- Rendering every error through a single error page
"""
