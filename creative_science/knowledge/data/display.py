"""Human-readable domain names used by the context formatter and CLI."""

DOMAIN_DISPLAY_NAMES: dict[str, str] = {
    "neuromarketing": "Neuromarketing",
    "marketing_psychology": "Marketing Psychology",
    "crowd_psychology": "Crowd Psychology",
    "platform_best_practices": "Platform Best Practices",
    "color_psychology": "Color Psychology",
    "copywriting_psychology": "Copywriting Psychology",
}


def display_name(domain: str, names: dict[str, str] | None = None) -> str:
    """Display name of a domain, falling back to a title-cased identifier."""
    table = DOMAIN_DISPLAY_NAMES if names is None else names
    return table.get(domain) or domain.replace("_", " ").title()
