import base64

import pytest

# Sample payload: a map with message_id and a list of three stock quotes.
STOCKS_B64 = (
    "g3QAAAACZAAKbWVzc2FnZV9pZGElZAAGc3RvY2tzbAAAAAN0AAAABWQACWF2Z19wcmljZUZAJFwo"
    "9cKPXGQABGNvZGVtAAAAA0ZQVGQAAmlkYQlkAAZzZWxsXzFGQCTR64UeuFJkAARzdGVwRj/cKPXC"
    "j1wpdAAAAAVkAAlhdmdfcHJpY2VGQEBQo9cKPXFkAARjb2RlbQAAAANBQ0JkAAJpZGEAZAAGc2Vs"
    "bF8xRkBJpmZmZmZmZAAEc3RlcEZAMZcKPXCj13QAAAAFZAAJYXZnX3ByaWNlRkA0euFHrhR7ZAAE"
    "Y29kZW0AAAADUExYZAACaWRhBGQABnNlbGxfMUZAPOj1wo9cKWQABHN0ZXBGQCNwo9cKPXFq"
)

STOCKS = {
    "message_id": 37,
    "stocks": [
        {"avg_price": 10.18, "code": "FPT", "id": 9, "sell_1": 10.41, "step": 0.44},
        {"avg_price": 32.63, "code": "ACB", "id": 0, "sell_1": 51.3, "step": 17.59},
        {"avg_price": 20.48, "code": "PLX", "id": 4, "sell_1": 28.91, "step": 9.72},
    ],
}


@pytest.fixture
def stocks_b64() -> str:
    return STOCKS_B64


@pytest.fixture
def stocks_bytes() -> bytes:
    return base64.b64decode(STOCKS_B64)


@pytest.fixture
def stocks() -> dict:
    return STOCKS
