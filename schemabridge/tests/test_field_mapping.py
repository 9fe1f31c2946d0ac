from schemabridge.translation.field_mapping import (
    CHAT_TO_RESPONSE_RULES,
    DROP,
    RENAME,
    RESPONSE_TO_CHAT_RULES,
    RULE_KINDS,
    apply_field_rules,
    dropped_fields,
    known_fields,
    pass_through_unknown_fields,
)


def test_every_rule_uses_a_supported_kind_and_drop_rules_have_no_destination():
    for rule in (*CHAT_TO_RESPONSE_RULES, *RESPONSE_TO_CHAT_RULES):
        assert rule.kind in RULE_KINDS
        assert (rule.dest is None) == (rule.kind == DROP)


def test_drop_sets_are_subsets_of_known_sets():
    assert dropped_fields(CHAT_TO_RESPONSE_RULES) <= known_fields(CHAT_TO_RESPONSE_RULES)
    assert dropped_fields(RESPONSE_TO_CHAT_RULES) <= known_fields(RESPONSE_TO_CHAT_RULES)


def test_rename_destinations_are_known_in_the_other_schema():
    chat_known = known_fields(CHAT_TO_RESPONSE_RULES)
    response_known = known_fields(RESPONSE_TO_CHAT_RULES)
    for rule in CHAT_TO_RESPONSE_RULES:
        if rule.kind == RENAME:
            assert rule.dest in response_known
    for rule in RESPONSE_TO_CHAT_RULES:
        if rule.kind == RENAME:
            assert rule.dest in chat_known


def test_wrong_typed_and_null_values_are_skipped():
    source = {
        "model": "m",
        "messages": [{"role": "user", "content": "Hi"}],
        "temperature": "hot",
        "top_p": None,
        "stream": 1,
        "tools": {"not": "a list"},
        "metadata": ["x"],
        "response_format": {},
    }

    target = apply_field_rules(CHAT_TO_RESPONSE_RULES, source)

    assert target == {"model": "m", "input": [{"role": "user", "content": "Hi"}]}


def test_max_tokens_falls_back_to_max_completion_tokens():
    base = {"model": "m", "messages": [{"role": "user", "content": "Hi"}]}

    assert apply_field_rules(CHAT_TO_RESPONSE_RULES, {**base, "max_completion_tokens": 77})["max_output_tokens"] == 77
    assert apply_field_rules(CHAT_TO_RESPONSE_RULES, {**base, "max_tokens": 5, "max_completion_tokens": 77})[
        "max_output_tokens"
    ] == 5
    assert apply_field_rules(CHAT_TO_RESPONSE_RULES, {**base, "max_tokens": None, "max_completion_tokens": 9})[
        "max_output_tokens"
    ] == 9


def test_response_format_and_text_restructure():
    chat = apply_field_rules(
        CHAT_TO_RESPONSE_RULES,
        {"model": "m", "messages": [], "response_format": {"type": "json_object"}},
    )
    assert chat["text"] == {"format": "json_object"}

    untyped = apply_field_rules(CHAT_TO_RESPONSE_RULES, {"model": "m", "response_format": {"schema": {}}})
    assert untyped["text"] == {"format": "json_object"}

    back = apply_field_rules(RESPONSE_TO_CHAT_RULES, {"model": "m", "input": "x", "text": {"format": "text"}})
    assert back["response_format"] == {"type": "text"}

    descriptor = {"type": "json_schema", "name": "answer", "schema": {"type": "object"}}
    structured = apply_field_rules(RESPONSE_TO_CHAT_RULES, {"model": "m", "input": "x", "text": {"format": descriptor}})
    assert structured["response_format"] == descriptor


def test_instructions_prepend_system_message():
    target = apply_field_rules(
        RESPONSE_TO_CHAT_RULES,
        {"model": "m", "input": "Hi", "instructions": "Be terse"},
    )

    assert target["messages"] == [
        {"role": "system", "content": "Be terse"},
        {"role": "user", "content": "Hi"},
    ]


def test_pass_through_skips_dropped_and_nested_paths():
    target: dict = {}
    cleaned = {"future_field": 42, "stop": ["\n"], "text": {"verbosity": "low"}}

    pass_through_unknown_fields(
        ["future_field", "stop", "text.verbosity"],
        cleaned,
        target,
        lambda name: name == "stop",
    )

    assert target == {"future_field": 42}


def test_pass_through_keeps_table_built_keys():
    target = {"messages": [{"role": "user", "content": "Hi"}]}

    pass_through_unknown_fields(["messages", "extra"], {"messages": "junk", "extra": 1}, target, lambda name: False)

    assert target == {"messages": [{"role": "user", "content": "Hi"}], "extra": 1}
