import pytest
from postgrest.exceptions import APIError

from manager_survey import SupabaseConfig


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.op = None

    def select(self, *columns, **kwargs):
        self.op = ("select", columns, kwargs)
        return self

    def insert(self, rows):
        self.op = ("insert", rows)
        return self

    def execute(self):
        self.client.calls.append((self.table,) + self.op)
        err = self.client.errors.get(self.op[0])
        if err is not None:
            raise err
        return object()


class FakeClient:
    """In-memory stand-in for supabase.Client; errors maps "select"/"insert" to an exception."""

    def __init__(self):
        self.calls = []
        self.errors = {}
        self.created_with = None

    def table(self, name):
        return FakeQuery(self, name)

    def factory(self, url, key, options=None):
        self.created_with = (url, key, options)
        return self

    @property
    def inserted(self):
        return [c[2][0] for c in self.calls if c[1] == "insert"]


@pytest.fixture
def api_error():
    def make(message):
        return APIError({"message": message, "code": "42P01", "hint": None, "details": None})
    return make


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def config():
    return SupabaseConfig(url="https://example.supabase.co", service_key="service-key")


@pytest.fixture
def valid_body():
    return {
        "country": "Mexico",
        "q1": "Satisfied",
        "q2": "Clear goals",
        "q3": "More check-ins",
        "q4": "No",
        "q6": "Adequate",
        "q7": "Good",
        "q8": "No",
        "q10": "Neutral",
        "q11": "Bonuses",
        "q12": "Paid on time",
        "q13": "Base salary",
        "q14": "Market review",
        "q15": "Easy to use",
    }
