"""Class-token policy for rendered section elements"""

from mdsection.config import SectionConfig


def compute_classes(level: int, config: SectionConfig) -> str:
    """Return the space-separated class tokens for a section of the given level.

    Options apply in a fixed order: section-h{level}, h{level}, {prefix}h{level},
    then the literal custom class. Returns '' when every option is off or empty.
    """
    tokens = []
    if config.section_class:
        tokens.append(f"section-h{level}")
    if config.heading_class:
        tokens.append(f"h{level}")
    if config.custom_class_prefix:
        tokens.append(f"{config.custom_class_prefix}h{level}")
    if config.custom_class:
        tokens.append(config.custom_class)
    return " ".join(tokens).strip()
