"""Message text for package notifications."""

from __future__ import annotations


def compose_package_message(
    display_name: str | None,
    property_id: str,
    size_filter: str,
    asset_count: int,
) -> str:
    greeting = f"Hi {display_name}," if display_name else "Hi,"
    if asset_count == 0:
        return (
            f"{greeting} we could not find any {size_filter} sqft packages for "
            f"{property_id} right now. Our team will follow up with you shortly."
        )
    noun = "package" if asset_count == 1 else "packages"
    return (
        f"{greeting} here are {asset_count} {noun} for the {size_filter} sqft "
        f"units at {property_id}."
    )
