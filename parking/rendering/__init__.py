"""HTML rendering for landing pages"""
from parking.rendering.pages import (
    format_price,
    render_domain_page,
    render_not_found,
    render_platform_home,
)

__all__ = ["format_price", "render_domain_page", "render_not_found", "render_platform_home"]
