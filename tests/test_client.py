"""Tests for easy and top feed retrieval through NhkNewsClient."""

import pytest

from nhk_news import Article, FetchError


# ============================================================
# EASY FEED
# ============================================================

def test_easy_single_article(client, transport, easy_url):
    transport.serve(easy_url, [{"2024-01-01": [{"news_id": "a1"}]}])

    news = client.fetch_easy_news()

    assert news == [Article(id="a1")]
    assert transport.requests == [easy_url]


def test_easy_flattens_days_in_feed_order(client, transport, easy_url):
    transport.serve(
        easy_url,
        [
            {
                "2024-01-03": [{"news_id": "c1"}, {"news_id": "c2"}],
                "2024-01-02": [{"news_id": "b1"}],
                "2024-01-01": [{"news_id": "a1"}, {"news_id": "a2"}],
            }
        ],
    )

    assert [a.id for a in client.fetch_easy_news()] == ["c1", "c2", "b1", "a1", "a2"]


@pytest.mark.parametrize("body", ["[]", "null", "{}", '"text"', "42", "", "   "])
def test_easy_unexpected_payload_is_empty(client, transport, easy_url, body):
    transport.serve(easy_url, body)
    assert client.fetch_easy_news() == []


def test_easy_first_element_not_an_object(client, transport, easy_url):
    transport.serve(easy_url, [[{"news_id": "a1"}]])
    assert client.fetch_easy_news() == []


def test_easy_skips_non_array_days(client, transport, easy_url):
    transport.serve(
        easy_url,
        [{"2024-01-02": "oops", "2024-01-01": [{"news_id": "a1"}], "meta": {"count": 1}, "none": None}],
    )
    assert [a.id for a in client.fetch_easy_news()] == ["a1"]


def test_easy_only_reads_first_element(client, transport, easy_url):
    transport.serve(easy_url, [{"2024-01-01": [{"news_id": "a1"}]}, {"2024-01-02": [{"news_id": "b1"}]}])
    assert [a.id for a in client.fetch_easy_news()] == ["a1"]


def test_easy_drops_malformed_records_individually(client, transport, easy_url):
    transport.serve(easy_url, [{"2024-01-01": [{"news_id": "a1"}, None, 7, {"news_id": "a2"}]}])
    assert [a.id for a in client.fetch_easy_news()] == ["a1", "a2"]


def test_easy_tolerates_invisible_characters(client, transport, easy_url):
    transport.serve(easy_url, '\ufeff\u200b \n[{"2024-01-01": [{"news_id": "a1"}]}]\n\u200b')
    assert [a.id for a in client.fetch_easy_news()] == ["a1"]


def test_easy_non_2xx_raises(client, transport, easy_url):
    transport.serve(easy_url, "Not Found", status=404)

    with pytest.raises(FetchError) as excinfo:
        client.fetch_easy_news()

    assert excinfo.value.status == 404
    assert excinfo.value.url == easy_url
    assert "404" in str(excinfo.value)
    assert "Not Found" in str(excinfo.value)


def test_easy_invalid_json_raises(client, transport, easy_url):
    transport.serve(easy_url, "<html>maintenance</html>")

    with pytest.raises(FetchError) as excinfo:
        client.fetch_easy_news()

    assert excinfo.value.status == 200
    assert "invalid JSON" in str(excinfo.value)


# ============================================================
# TOP FEED
# ============================================================

def test_top_decodes_in_order(client, transport, top_url):
    transport.serve(
        top_url,
        [
            {"news_id": "t1", "top_priority_number": "1", "top_display_flag": True, "outline_with_ruby": "o1"},
            {"news_id": "t2", "top_priority_number": "2"},
        ],
    )

    news = client.fetch_top_news()

    assert [a.id for a in news] == ["t1", "t2"]
    assert news[0].priority_number == "1"
    assert news[0].display_flag is True
    assert news[0].outline_with_ruby == "o1"
    assert news[1].display_flag is False
    assert transport.requests == [top_url]


@pytest.mark.parametrize("body", ["[]", "null", "{}", '{"news_id": "t1"}', ""])
def test_top_unexpected_payload_is_empty(client, transport, top_url, body):
    transport.serve(top_url, body)
    assert client.fetch_top_news() == []


def test_top_malformed_record_discards_whole_batch(client, transport, top_url):
    transport.serve(top_url, [{"news_id": "t1"}, None, {"news_id": "t3"}])
    assert client.fetch_top_news() == []


def test_top_tolerates_invisible_characters(client, transport, top_url):
    transport.serve(top_url, '\ufeff[{"news_id": "t1"}]\u200b')
    assert [a.id for a in client.fetch_top_news()] == ["t1"]


@pytest.mark.parametrize("status", [301, 403, 500, 503])
def test_top_non_2xx_raises(client, transport, top_url, status):
    transport.serve(top_url, "error", status=status)

    with pytest.raises(FetchError) as excinfo:
        client.fetch_top_news()

    assert excinfo.value.status == status
    assert excinfo.value.body == "error"


def test_feed_asymmetry_for_the_same_records(client, transport, easy_url, top_url):
    records = [{"news_id": "x1"}, None]
    transport.serve(easy_url, [{"2024-01-01": records}])
    transport.serve(top_url, records)

    assert [a.id for a in client.fetch_easy_news()] == ["x1"]
    assert client.fetch_top_news() == []


def test_transport_error_propagates(config):
    from nhk_news import NhkNewsClient

    class BrokenTransport:
        def get(self, url):
            raise FetchError(url, reason="connection refused")

    client = NhkNewsClient(BrokenTransport(), config=config)

    with pytest.raises(FetchError, match="connection refused"):
        client.fetch_top_news()


def test_custom_base_url_is_used(transport):
    from nhk_news import ClientConfig, NhkNewsClient

    config = ClientConfig(base_url="https://mirror.example.com/easy")
    transport.serve("https://mirror.example.com/easy/top-list.json", [])

    assert NhkNewsClient(transport, config=config).fetch_top_news() == []
    assert transport.requests == ["https://mirror.example.com/easy/top-list.json"]


@pytest.mark.parametrize(
    "body",
    [
        "[" + "1" * 5000 + "]",
        "[" * 100000 + "]" * 100000,
    ],
    ids=["oversized-integer", "deep-nesting"],
)
def test_undecodable_json_raises_fetch_error(client, transport, top_url, body):
    transport.serve(top_url, body)

    with pytest.raises(FetchError, match="invalid JSON") as excinfo:
        client.fetch_top_news()

    assert excinfo.value.status == 200
