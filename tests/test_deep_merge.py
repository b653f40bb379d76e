from threadpress.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "layout": {"column_gap": 20, "title": {"size": 20}},
        "list": [1, 2],
    }
    override = {
        "layout": {"title": {"size": 24}},
        "list": [3],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {"layout": {"column_gap": 20, "title": {"size": 24}}, "list": [3]}
    # ensure original not mutated
    assert base["list"] == [1, 2]
