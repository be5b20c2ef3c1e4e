from offline_gateway.core.utils import create_unique_id, format_to_clf_time, null_if_empty


def test_format_to_clf_time():
    assert format_to_clf_time(1700000000000) == "14/Nov/2023:22:13:20 +0000"
    assert format_to_clf_time(0) == "01/Jan/1970:00:00:00 +0000"


def test_format_to_clf_time_pads_fields():
    # 2024-03-05T04:05:06.789Z
    assert format_to_clf_time(1709611506789) == "05/Mar/2024:04:05:06 +0000"


def test_create_unique_id_is_unique():
    ids = {create_unique_id() for _ in range(100)}

    assert len(ids) == 100


def test_null_if_empty():
    source = {"id": "1"}

    assert null_if_empty({}) is None
    assert null_if_empty(None) is None
    copied = null_if_empty(source)
    assert copied == source
    assert copied is not source
