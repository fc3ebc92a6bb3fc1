from models.verdicts import Verdict

TRUE_INDICATORS = ("correct", "accurate", "verified")
FALSE_INDICATORS = ("incorrect", "inaccurate", "false")
PARTIAL_INDICATORS = ("partially", "somewhat", "not entirely")


def _count_present(text: str, indicators) -> int:
    return sum(1 for indicator in indicators if indicator in text)


def determine_truth_status(analysis: str) -> Verdict:
    """
    Map the model's free-text analysis to a verdict.

    Explicit verdict phrases win, checked true, false, then partially true.
    Otherwise each indicator group is scored by how many of its words appear.
    Any partial indicator means partially true; otherwise true needs strictly
    more true indicators than false ones, so ties and no matches give false.
    """
    text = analysis.lower()

    if "verdict: true" in text or "claim is true" in text:
        return Verdict.TRUE
    if "verdict: false" in text or "claim is false" in text:
        return Verdict.FALSE
    if "verdict: partially true" in text or "claim is partially true" in text:
        return Verdict.PARTIALLY_TRUE

    score = {
        "true": _count_present(text, TRUE_INDICATORS),
        "false": _count_present(text, FALSE_INDICATORS),
        "partial": _count_present(text, PARTIAL_INDICATORS),
    }

    if score["partial"] > 0:
        return Verdict.PARTIALLY_TRUE
    return Verdict.TRUE if score["true"] > score["false"] else Verdict.FALSE
