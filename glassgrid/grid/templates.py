"""
Component Template Catalog

Metadata for the components that can be dropped into a cell. The engine
only reads `default_content` to seed a cell when a template is dropped; the
shape of that payload belongs to the renderer of each template.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TemplateInfo:
    """Template metadata for the template picker."""

    id: str
    name: str
    description: str
    icon: str
    category: str  # "cards", "forms", "widgets", "navigation", "media", "layout"
    default_content: Dict[str, Any] = field(default_factory=dict)


TEMPLATES: List[TemplateInfo] = [
    # Cards
    TemplateInfo(
        id="profile",
        name="Profile Card",
        description="User profile with avatar and bio",
        icon="👤",
        category="cards",
        default_content={
            "name": "John Doe",
            "title": "Software Engineer",
            "bio": "Building amazing experiences",
            "email": "john@example.com",
        },
    ),
    TemplateInfo(
        id="pricing",
        name="Pricing Card",
        description="Subscription plan with features",
        icon="💳",
        category="cards",
        default_content={
            "planName": "Pro",
            "price": "$29",
            "period": "/month",
            "features": [
                {"text": "Unlimited projects", "included": True},
                {"text": "Priority support", "included": True},
                {"text": "Custom domain", "included": True},
            ],
        },
    ),
    TemplateInfo(
        id="feature",
        name="Feature Card",
        description="Highlight a feature with icon",
        icon="⚡",
        category="cards",
        default_content={
            "icon": "zap",
            "title": "Lightning Fast",
            "description": "Blazing performance",
            "badge": "New",
        },
    ),
    TemplateInfo(
        id="testimonial",
        name="Testimonial",
        description="Customer quote with rating",
        icon="💬",
        category="cards",
        default_content={
            "quote": "Amazing product!",
            "author": "Jane Smith",
            "role": "CEO",
            "company": "TechCorp",
            "rating": 5,
        },
    ),
    # Forms
    TemplateInfo(
        id="login-form",
        name="Login Form",
        description="Email and password login",
        icon="🔐",
        category="forms",
        default_content={
            "title": "Welcome Back",
            "subtitle": "Sign in to your account",
            "showSocial": True,
            "showRemember": True,
        },
    ),
    TemplateInfo(
        id="contact-form",
        name="Contact Form",
        description="Contact form with info",
        icon="✉️",
        category="forms",
        default_content={
            "title": "Get in Touch",
            "subtitle": "We'd love to hear from you!",
            "showContactInfo": True,
            "buttonText": "Send Message",
        },
    ),
    # Widgets
    TemplateInfo(
        id="stats-widget",
        name="Stats Widget",
        description="Number with trend indicator",
        icon="📈",
        category="widgets",
        default_content={
            "label": "Total Users",
            "value": "12,345",
            "trend": "+12%",
            "trendUp": True,
        },
    ),
    TemplateInfo(
        id="chart-widget",
        name="Chart Widget",
        description="Mini chart visualization",
        icon="📊",
        category="widgets",
        default_content={
            "title": "Revenue",
            "chartType": "line",
            "data": [30, 45, 35, 55, 40, 60, 50],
        },
    ),
    TemplateInfo(
        id="notification-toast",
        name="Notification",
        description="Toast notification message",
        icon="🔔",
        category="widgets",
        default_content={
            "type": "success",
            "title": "Success!",
            "message": "Your changes have been saved.",
            "showIcon": True,
        },
    ),
    TemplateInfo(
        id="data-table",
        name="Data Table",
        description="Sortable data table",
        icon="📊",
        category="widgets",
        default_content={
            "title": "Users",
            "showSearch": True,
            "showFilter": True,
            "columns": ["Name", "Email", "Status", "Role"],
        },
    ),
    # Navigation
    TemplateInfo(
        id="sidebar-nav",
        name="Sidebar Nav",
        description="Vertical navigation menu",
        icon="📑",
        category="navigation",
        default_content={
            "items": [
                {"icon": "home", "label": "Dashboard", "active": True},
                {"icon": "chart", "label": "Analytics", "badge": "3"},
                {"icon": "settings", "label": "Settings"},
            ],
        },
    ),
    TemplateInfo(
        id="nav-bar",
        name="Navigation Bar",
        description="Top navigation with search",
        icon="🧭",
        category="navigation",
        default_content={
            "logo": "GlassUI",
            "showSearch": True,
            "showNotifications": True,
            "showProfile": True,
            "menuItems": ["Home", "Features", "Pricing", "About"],
        },
    ),
    # Media
    TemplateInfo(
        id="music-player",
        name="Music Player",
        description="Audio player card",
        icon="🎵",
        category="media",
        default_content={
            "title": "Blinding Lights",
            "artist": "The Weeknd",
            "albumArt": "",
            "progress": 45,
            "duration": "3:20",
        },
    ),
    TemplateInfo(
        id="image-gallery",
        name="Image Gallery",
        description="Grid gallery with actions",
        icon="🖼️",
        category="media",
        default_content={
            "title": "Gallery",
            "showViewToggle": True,
            "columns": 3,
        },
    ),
    # Page sections
    TemplateInfo(
        id="hero-section",
        name="Hero Section",
        description="Landing page hero with CTA",
        icon="🚀",
        category="layout",
        default_content={
            "title": "Build Something Amazing",
            "subtitle": "The Next Generation Platform",
            "primaryButtonText": "Get Started",
            "secondaryButtonText": "Watch Demo",
            "showRating": True,
        },
    ),
    TemplateInfo(
        id="footer-section",
        name="Footer",
        description="Site footer with links",
        icon="📋",
        category="layout",
        default_content={
            "companyName": "GlassUI",
            "tagline": "Beautiful glassmorphic components",
            "showSocial": True,
            "showLinks": True,
        },
    ),
    # Placeholder
    TemplateInfo(
        id="empty",
        name="Empty",
        description="Empty placeholder cell",
        icon="⬜",
        category="cards",
    ),
]

_BY_ID: Dict[str, TemplateInfo] = {t.id: t for t in TEMPLATES}


def find_template(template_id: str) -> Optional[TemplateInfo]:
    """Look up a template, returning None if unknown."""
    return _BY_ID.get(template_id)


def get_template(template_id: str) -> TemplateInfo:
    """
    Get template metadata by id.

    Raises:
        ValueError: If the template id is not found
    """
    template = _BY_ID.get(template_id)
    if template is None:
        available = ", ".join(sorted(_BY_ID.keys()))
        raise ValueError(f"Unknown template '{template_id}'. Available: {available}")
    return template


def list_templates() -> List[str]:
    """List all template ids in catalog order."""
    return [t.id for t in TEMPLATES]


def get_templates_by_category(category: str) -> List[TemplateInfo]:
    return [t for t in TEMPLATES if t.category == category]


def get_template_categories() -> List[str]:
    """Categories in first-seen order."""
    categories: List[str] = []
    for t in TEMPLATES:
        if t.category not in categories:
            categories.append(t.category)
    return categories
