"""Testing utilities for code built on payup.

Example:
    ```python
    from payup import Client, Credential, Customer
    from payup.testing import StubApi

    def test_lists_customers():
        api = StubApi(page_size=2)
        api.add_collection("customers", [{"id": "cus_1"}, {"id": "cus_2"}, {"id": "cus_3"}])

        with Client(Credential("sk_test"), transport=api.transport()) as client:
            assert [c.id for c in Customer.list_all(client)] == ["cus_1", "cus_2", "cus_3"]
    ```
"""

from payup.testing.stub import StubApi, error_envelope, list_envelope

__all__ = ["StubApi", "error_envelope", "list_envelope"]
