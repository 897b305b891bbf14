"""Unit tests for assistant reply formatting."""

from radixpert.chat.formatting import emphasize_terms, format_lists, format_reply

# ---------------------------------------------------------------------------
# Term emphasis
# ---------------------------------------------------------------------------


def test_bare_term_is_emphasized():
    result = format_reply("cardiomegaly is enlargement of the heart.")
    assert result == "**Cardiomegaly** is enlargement of the heart."


def test_every_case_variant_is_emphasized():
    result = emphasize_terms("Cardiomegaly, or CARDIOMEGALY, means cardiomegaly.")
    assert result == (
        "**Cardiomegaly**, or **Cardiomegaly**, means **Cardiomegaly**."
    )


def test_existing_emphasis_leaves_text_alone():
    text = "**Cardiomegaly** is common; cardiomegaly has many causes."
    assert emphasize_terms(text) == text


def test_text_without_term_is_unchanged():
    text = "The lungs are clear."
    assert format_reply(text) == text


# ---------------------------------------------------------------------------
# List formatting
# ---------------------------------------------------------------------------


def test_lead_in_and_clauses_become_bullets():
    text = (
        "Heart enlargement can include: Hypertension: raised pressure strains "
        "the heart. Valve disease: damaged valves add workload."
    )
    assert format_lists(text) == (
        "Heart enlargement can include:\n\n- Hypertension: raised pressure "
        "strains the heart.\n\n- **Valve disease**: damaged valves add workload."
    )


def test_factors_lead_in_with_term_emphasis():
    text = "cardiomegaly can result from various factors, including: hypertension."
    assert format_reply(text) == (
        "**Cardiomegaly** can result from various factors, including:"
        "\n\n- hypertension."
    )


def test_lead_in_match_is_case_insensitive():
    text = "Findings Can Include: effusion, which factors into staging."
    assert format_lists(text) == (
        "Findings Can Include:\n\n- effusion, which factors into staging."
    )


def test_existing_bullets_skip_list_formatting():
    text = "Causes can include:\n- Hypertension\n- Valve disease"
    assert format_lists(text) == text


def test_lead_in_without_trigger_words_is_unchanged():
    # "can be caused by:" alone does not contain "factors" or "include"
    text = "It can be caused by: Hypertension. Valve disease: extra workload."
    assert format_lists(text) == text


def test_trigger_words_without_lead_in_are_unchanged():
    text = "Risk factors include age. Smoking: a major contributor."
    assert format_lists(text) == text


def test_unrelated_colon_clause_is_rewritten():
    """Known fragile path: any capitalized clause ending in a colon after a
    sentence becomes a bullet, even when it is not a list item."""
    text = "Findings can include: Effusion. Note: correlate clinically."
    assert format_lists(text) == (
        "Findings can include:\n\n- Effusion.\n\n- **Note**: correlate clinically."
    )


def test_user_markdown_outside_rules_is_preserved():
    text = "Use a PA view (not AP) when possible.\n\nThanks!"
    assert format_reply(text) == text
