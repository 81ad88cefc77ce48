"""Property-based tests for feed building and serialization."""

from datetime import datetime, timedelta, timezone

from hypothesis import given
from hypothesis import strategies as st

from postfeed.feeds import build_feed, parse_feed, serialize_feed
from postfeed.models import Post, PostResponse, PostUser, TenantInfo

BASE_URL = "https://acme.example"
TENANT = TenantInfo(name="Acme", welcome_message="", base_url=BASE_URL)

offsets = st.integers(min_value=-14 * 60, max_value=14 * 60).map(
    lambda minutes: timezone(timedelta(minutes=minutes))
)
timestamps = st.datetimes(
    min_value=datetime(1971, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=offsets,
).map(lambda value: value.replace(microsecond=0))

# Characters XML 1.0 can carry verbatim in element text
xml_text = st.text(
    alphabet=st.characters(exclude_categories=("Cc", "Cs", "Cn")) | st.sampled_from('<>&"\''),
    max_size=60,
)


@st.composite
def posts(draw, post_id: int) -> Post:
    return Post(
        id=post_id,
        title=draw(xml_text),
        description=draw(xml_text),
        created_at=draw(timestamps),
        user=PostUser(name=draw(xml_text)),
        response=draw(st.one_of(st.none(), timestamps.map(lambda ts: PostResponse(responded_at=ts)))),
    )


@st.composite
def post_lists(draw, min_size: int = 0, max_size: int = 8) -> list[Post]:
    size = draw(st.integers(min_value=min_size, max_value=max_size))
    ids = draw(st.lists(st.integers(min_value=1, max_value=10**6), min_size=size, max_size=size, unique=True))
    return [draw(posts(post_id)) for post_id in ids]


@given(post_lists(min_size=1))
def test_feed_updated_is_latest_post_timestamp(items: list[Post]) -> None:
    """Feed updated equals the max of all creation and response timestamps."""
    candidates = [post.created_at for post in items]
    candidates += [post.response.responded_at for post in items if post.response]

    feed = build_feed(TENANT, items, BASE_URL)

    assert datetime.fromisoformat(feed.updated) == max(candidates)


@given(post_lists())
def test_entries_follow_input_order(items: list[Post]) -> None:
    feed = build_feed(TENANT, items, BASE_URL)

    assert [entry.id for entry in feed.entries] == [f"{BASE_URL}/posts/{post.id}" for post in items]
    assert all(len(entry.links) == 2 for entry in feed.entries)
    assert len(feed.links) == 2


@given(post_lists())
def test_entry_updated_present_only_with_response(items: list[Post]) -> None:
    feed = parse_feed(serialize_feed(build_feed(TENANT, items, BASE_URL)))

    for post, entry in zip(items, feed.entries):
        if post.response is None:
            assert entry.updated is None
        else:
            assert datetime.fromisoformat(entry.updated) == post.response.responded_at


@given(post_lists())
def test_serialized_feed_round_trips(items: list[Post]) -> None:
    """Serializing then parsing gives back the same document structure."""
    feed = build_feed(TENANT, items, BASE_URL)

    parsed = parse_feed(serialize_feed(feed))

    assert parsed.title == feed.title
    assert parsed.subtitle == feed.subtitle
    assert parsed.id == feed.id
    assert parsed.updated == feed.updated
    assert parsed.links == feed.links
    assert len(parsed.entries) == len(feed.entries)
    assert [entry.title for entry in parsed.entries] == [post.title for post in items]
    assert [entry.summary.body for entry in parsed.entries] == [post.description for post in items]
