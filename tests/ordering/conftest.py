import pytest
from protean.integrations.pytest import DomainFixture


class OrderingFixture(DomainFixture):
    """Orders live in OrderStore, so there are no domain elements to discover."""

    def setup(self) -> None:
        self.domain.init(traverse=False)
        with self.domain.domain_context():
            self.domain.setup_database()


@pytest.fixture(scope="session")
def ordering_bed():
    from storefront.ordering.domain import ordering

    bed = OrderingFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield
