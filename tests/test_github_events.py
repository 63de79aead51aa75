"""
Tests for GitHub payload rendering.
"""

from GitHub_Events import RENDERERS, format_sender, render_event
from Formatting import cut_down_text, escape_html, quote_body, truncate

REPOSITORY = {"full_name": "octo/widgets", "html_url": "https://github.com/octo/widgets"}
SENDER = {"login": "mona", "html_url": "https://github.com/mona"}


def payload(**extra):
    data = {"repository": REPOSITORY, "sender": SENDER}
    data.update(extra)
    return data


def commit(index):
    return {
        "id": f"{index:07d}abcdef",
        "url": f"https://github.com/octo/widgets/commit/{index}",
        "author": {"name": "Mona Lisa", "username": "mona"},
        "message": f"Commit {index}\n\nLong description",
    }


class TestSenderAndRepo:
    """Tests for the shared sender/repository rendering."""

    def test_sender_link(self):
        assert format_sender(payload()) == '<a href="https://github.com/mona">mona</a>'

    def test_sender_without_profile_is_escaped(self):
        assert format_sender({"sender": {"login": "<b>x</b>"}}) == "&lt;b&gt;x&lt;/b&gt;"

    def test_missing_sender(self):
        assert format_sender({}) == "Unknown"


class TestPush:
    """Tests for push events."""

    def test_lists_commits_and_compare_link(self):
        message = render_event("push", payload(
            ref="refs/heads/main",
            commits=[commit(1), commit(2)],
            compare="https://github.com/octo/widgets/compare/a...b",
        ))
        assert "total <b>2</b> commits on <b>refs/heads/main</b>" in message
        assert "[0000001]" in message
        assert "<code>Commit 1...</code>" in message
        assert "Compare Changes" in message

    def test_single_commit_is_singular(self):
        message = render_event("push", payload(ref="refs/heads/main", commits=[commit(1)]))
        assert "total <b>1</b> commit on" in message

    def test_long_pushes_are_summarized(self):
        message = render_event("push", payload(ref="refs/heads/main", commits=[commit(i) for i in range(10)]))
        assert message.count(" • <b>") == 7
        assert " • And 3 more" in message

    def test_tag_pushes_are_skipped(self):
        assert render_event("push", payload(ref="refs/tags/v1.0", commits=[])) is None


class TestOtherEvents:
    """Tests for a sample of the remaining event types."""

    def test_star(self):
        assert render_event("star", payload(action="created")).startswith(
            '⭐ <a href="https://github.com/mona">mona</a> <b>added</b> a star to'
        )
        assert "<b>removed</b> a star from" in render_event("star", payload(action="deleted"))

    def test_pull_request_long_body_is_cut(self):
        message = render_event("pull_request", payload(
            action="opened",
            pull_request={"title": "Add <widgets>", "html_url": "https://github.com/octo/widgets/pull/1", "body": "a" * 1500},
        ))
        assert "<b>Add &lt;widgets&gt;</b>" in message
        assert "a" * 1000 + "...</code></pre>" in message
        assert "View Full Pull Request" in message

    def test_issue_labels_only_on_open(self):
        issue = {"title": "Broken", "html_url": "u", "body": "steps", "labels": [{"name": "bug", "url": "l"}]}
        assert "Labels:" in render_event("issues", payload(action="opened", issue=issue))
        assert "Labels:" not in render_event("issues", payload(action="closed", issue=issue))

    def test_workflow_run_status(self):
        run = {
            "name": "CI", "html_url": "w", "status": "completed", "conclusion": "failure",
            "head_branch": "main", "run_number": 42, "event": "push",
            "head_commit": {"id": "deadbeefcafe", "url": "c", "message": "Fix build\nmore"},
        }
        message = render_event("workflow_run", payload(action="completed", workflow_run=run))
        assert message.startswith("❌ <b>Workflow Run</b>")
        assert "(failure)" in message
        assert "<b>Run #:</b> 42" in message
        assert "deadbee" in message

    def test_events_missing_their_object_are_skipped(self):
        assert render_event("workflow_job", payload(action="queued")) is None
        assert render_event("deployment", payload()) is None

    def test_unknown_event_is_skipped(self):
        assert render_event("marketplace_purchase", payload()) is None

    def test_every_renderer_survives_a_bare_payload(self):
        for event in RENDERERS:
            message = render_event(event, payload(action="created", ref="refs/heads/main"))
            assert message is None or isinstance(message, str)


class TestFormatting:
    """Tests for the shared text helpers."""

    def test_cut_down_text_keeps_first_line(self):
        assert cut_down_text("short") == "short"
        assert cut_down_text("first\nsecond") == "first..."
        assert cut_down_text("x" * 150) == "x" * 100 + "..."

    def test_truncate(self):
        assert truncate("abc") == "abc"
        assert truncate("y" * 60) == "y" * 47 + "..."

    def test_escape_html(self):
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
        assert escape_html(None) == ""

    def test_quote_body(self):
        assert quote_body(None) == ""
        assert quote_body("<hi>") == "\n\n<pre><code>&lt;hi&gt;</code></pre>"
