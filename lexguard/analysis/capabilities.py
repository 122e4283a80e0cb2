from lexguard.analysis.models import CapabilityTier

CapabilityProfile = tuple[CapabilityTier, CapabilityTier, CapabilityTier]


def select_capabilities(deep_analysis: bool) -> CapabilityProfile:
    """Map the deep-analysis flag to the three-tier ladder.

    Reasoning elevation is dropped first, then web search. Without deep
    analysis all three tiers are plain schema-constrained calls.
    """
    return (
        CapabilityTier(1, deep_reasoning=deep_analysis, web_search=deep_analysis),
        CapabilityTier(2, deep_reasoning=False, web_search=deep_analysis),
        CapabilityTier(3, deep_reasoning=False, web_search=False),
    )
