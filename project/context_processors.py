from django.conf import settings
from django.utils import timezone


def brand_context(request):
    """
    Inject branding into all templates.
    """
    return {
        "BRAND_NAME": getattr(settings, "BRAND_NAME", "Freelance Tracker"),
        "BRAND_TAGLINE": getattr(settings, "BRAND_TAGLINE", ""),
        "CURRENT_YEAR": timezone.localdate().year,
    }
