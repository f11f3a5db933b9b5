"""BDD tests for all-or-nothing order intake."""

from pytest_bdd import parsers, scenarios, then, when

scenarios("features/order_intake.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse("a batch of {size:d} orders is submitted where order {position:d} has no customer name"),
    target_fixture="response",
)
def _(client, order_payload, size, position):
    batch = [order_payload(email=f"shopper{index}@example.com") for index in range(size)]
    batch[position - 1]["customerName"] = ""
    return client.post("/api/orders", json=batch)


@when(parsers.cfparse("a batch of {size:d} orders is submitted"), target_fixture="response")
def _(client, order_payload, size):
    batch = [order_payload(email=f"shopper{index}@example.com") for index in range(size)]
    return client.post("/api/orders", json=batch)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the submission is rejected with status {status:d}"))
def _(response, status):
    assert response.status_code == status
    assert response.json()["error"] == "Missing required order fields"


@then(parsers.cfparse('the rejection names "{entry}"'))
def _(response, entry):
    assert list(response.json()["details"]) == [entry]


@then(parsers.cfparse("the submission is accepted with {count:d} order numbers"))
def _(response, count):
    assert response.status_code == 201
    numbers = response.json()["orderNumbers"]
    assert len(numbers) == count
    assert len(set(numbers)) == count
