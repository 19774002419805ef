from .site import (
    DATA_CATEGORY_SCHEMAS,
    FaqItem,
    ImageRef,
    NavItem,
    NavLink,
    SiteAuthor,
    SiteData,
    Testimonial,
    dump_payload,
)

# Define the public API of this module
__all__ = [
    "DATA_CATEGORY_SCHEMAS",
    "FaqItem",
    "ImageRef",
    "NavItem",
    "NavLink",
    "SiteAuthor",
    "SiteData",
    "Testimonial",
    "dump_payload",
]
