"""
GitHub Webhook Payload Rendering.

Maps An X-GitHub-Event Name To A Function Producing A Telegram HTML Message.
Renderers Return None When The Event Should Not Be Relayed.
"""

from typing import Callable, Dict, Optional

from Formatting import cut_down_text, escape_html, quote_body
from Logging_Config import logger

MAX_PUSH_COMMITS = 7
MAX_JOB_STEPS = 5

Renderer = Callable[[dict, str, str], Optional[str]]

STATUS_EMOJI = {
    "success": "✅",
    "failure": "❌",
    "cancelled": "🚫",
    "neutral": "⚪",
}


def status_emoji(conclusion: Optional[str], status: Optional[str]) -> str:
    """Emoji For A Workflow Or Check Result."""
    if conclusion in STATUS_EMOJI:
        return STATUS_EMOJI[conclusion]
    return "🔄" if status == "in_progress" else "⏳"


def link(url: Optional[str], text: str) -> str:
    return f"<a href=\"{escape_html(url or '')}\">{text}</a>"


def format_sender(payload: dict) -> str:
    """Sender Login, Linked To Their Profile When Possible."""
    sender = payload.get("sender")
    if not sender:
        return "Unknown"
    login = escape_html(sender.get("login", "Unknown"))
    if sender.get("html_url"):
        return link(sender["html_url"], login)
    return login


def format_repo(payload: dict) -> str:
    repository = payload.get("repository") or {}
    return link(repository.get("html_url"), escape_html(repository.get("full_name", "unknown")))


def commit_link(payload: dict, sha: str) -> str:
    full_name = (payload.get("repository") or {}).get("full_name", "")
    return link(f"https://github.com/{full_name}/commit/{sha}", escape_html(sha[:7]))


def result_suffix(conclusion: Optional[str]) -> str:
    return f" ({escape_html(conclusion)})" if conclusion else ""


# ---------------- Code Events ----------------
def render_push(payload: dict, sender: str, repo: str) -> Optional[str]:
    ref = payload.get("ref", "")
    if "refs/tags" in ref:
        return None

    commits = payload.get("commits") or []
    total = len(commits)

    message = f"🚀 <b>Push to</b> <b>{repo}</b>\n"
    message += f"👨‍🌾 <b>from</b>: <b>{sender}</b>\n\n"
    message += f"total <b>{total}</b> commit{'s' if total > 1 else ''} on <b>{escape_html(ref)}</b>\n"

    for commit in commits[:MAX_PUSH_COMMITS]:
        author = commit.get("author") or {}
        author_name = author.get("username") or author.get("name") or "Unknown"
        message += (
            f" • <b>{link(commit.get('url'), '[' + escape_html(commit.get('id', '')[:7]) + ']')}</b>: "
            f"{escape_html(author_name)} <code>{escape_html(cut_down_text(commit.get('message', '')))}</code>\n"
        )

    if total > MAX_PUSH_COMMITS:
        message += f" • And {total - MAX_PUSH_COMMITS} more\n"

    if payload.get("compare"):
        message += f"\n 🔍 {link(payload['compare'], 'Compare Changes')}"

    return message


def render_create(payload: dict, sender: str, repo: str) -> Optional[str]:
    ref_type = escape_html(payload.get("ref_type") or "item")
    ref = escape_html(payload.get("ref") or "unknown")
    return f"🎉 <b>{ref_type}</b> <code>{ref}</code> created by <b>{sender}</b> on {repo}"


def render_delete(payload: dict, sender: str, repo: str) -> Optional[str]:
    return f"💀 <b>Delete</b> <b>{escape_html(payload.get('ref', ''))}</b> by <b>{sender}</b>\n"


def render_commit_comment(payload: dict, sender: str, repo: str) -> Optional[str]:
    comment = payload.get("comment") or payload.get("commit_comment")
    if not comment:
        return None

    url = comment.get("html_url")
    message = f"💬 <b>Commit Comment</b> {link(url, 'added')} by <b>{sender}</b> on {repo}\n"
    if comment.get("path"):
        message += f"\n📍 <b>File:</b> <code>{escape_html(comment['path'])}</code>\n"
        message += f"📍 <b>Line:</b> {comment.get('line') or 0}\n"
    message += quote_body(comment.get("body"), url=url, label="View Full Comment")
    return message


# ---------------- Pull Requests ----------------
def render_pull_request(payload: dict, sender: str, repo: str) -> Optional[str]:
    pull_request = payload.get("pull_request") or {}
    url = pull_request.get("html_url", "")
    message = (
        f"🔄 {link(url, 'Pull Request')} {escape_html(payload.get('action', ''))} "
        f"<b>{escape_html(pull_request.get('title', ''))}</b> by <b>{sender}</b> on {repo}\n"
    )
    message += quote_body(pull_request.get("body"), url=url, label="View Full Pull Request")
    return message


REVIEW_EMOJI = {
    "approved": "✅",
    "changes_requested": "❌",
    "commented": "💬",
}


def render_pull_request_review(payload: dict, sender: str, repo: str) -> Optional[str]:
    review = payload.get("review")
    if not review:
        return None

    state = review.get("state", "")
    url = review.get("html_url")
    message = (
        f"{REVIEW_EMOJI.get(state, '⏳')} <b>Pull Request Review</b> {link(url, escape_html(state))} "
        f"by <b>{sender}</b> on {repo}\n"
    )
    message += quote_body(review.get("body"), url=url, label="View Full Review")
    return message


def render_pull_request_review_comment(payload: dict, sender: str, repo: str) -> Optional[str]:
    comment = payload.get("comment") or payload.get("review_comment")
    if not comment:
        return None

    url = comment.get("html_url")
    message = f"💬 <b>Review Comment</b> {link(url, 'added')} by <b>{sender}</b> on {repo}\n"
    message += f"\n📍 <b>File:</b> <code>{escape_html(comment.get('path', ''))}</code>\n"
    message += f"📍 <b>Line:</b> {comment.get('line') or comment.get('position') or 0}\n"
    message += quote_body(comment.get("body"), url=url, label="View Full Comment")
    return message


# ---------------- Issues ----------------
def render_issues(payload: dict, sender: str, repo: str) -> Optional[str]:
    issue = payload.get("issue") or {}
    action = payload.get("action", "")
    message = (
        f"🔄 Issue {link(issue.get('html_url'), escape_html(issue.get('title', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )

    if action == "opened":
        message += quote_body(issue.get("body"))
        labels = issue.get("labels") or []
        if labels:
            rendered = ", ".join(link(label.get("url"), escape_html(label.get("name", ""))) for label in labels)
            message += f"\n\n🔖 <b>Labels:</b> {rendered}"

    return message


def render_issue_comment(payload: dict, sender: str, repo: str) -> Optional[str]:
    comment = payload.get("comment") or {}
    action = "added" if payload.get("action") == "created" else "removed"
    message = f"💬 {link(comment.get('html_url'), 'Comment')} {action} by <b>{sender}</b> on {repo}\n"
    if action == "added":
        message += quote_body(comment.get("body"))
    return message


def render_milestone(payload: dict, sender: str, repo: str) -> Optional[str]:
    milestone = payload.get("milestone")
    if not milestone:
        return None

    action = payload.get("action", "")
    emoji = {"created": "🎯", "edited": "✏️", "closed": "✅", "opened": "🔓"}.get(action, "📝")
    message = (
        f"{emoji} <b>Milestone</b> {link(milestone.get('html_url'), escape_html(milestone.get('title', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📝 <b>Number:</b> #{milestone.get('number')}\n"
    message += f"📊 <b>State:</b> {escape_html(milestone.get('state', ''))}"
    if milestone.get("description"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(milestone['description'])}"
    return message


def render_label(payload: dict, sender: str, repo: str) -> Optional[str]:
    label = payload.get("label")
    if not label:
        return None

    action = payload.get("action", "")
    emoji = {"created": "🏷️", "edited": "✏️"}.get(action, "📝")
    message = f"{emoji} <b>Label</b> <code>{escape_html(label.get('name', ''))}</code> {escape_html(action)} by <b>{sender}</b> on {repo}"
    if label.get("description"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(label['description'])}"
    return message


# ---------------- Releases And Packages ----------------
def render_release(payload: dict, sender: str, repo: str) -> Optional[str]:
    release = payload.get("release") or {}
    action = payload.get("action", "")
    message = (
        f"🔄 Release {link(release.get('html_url'), escape_html(release.get('tag_name', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )

    assets = release.get("assets") or []
    if action == "released" and assets:
        message += "\n\n🔖 <b>Assets:</b>\n"
        for asset in assets:
            message += f"\n• {link(asset.get('browser_download_url') or asset.get('url'), escape_html(asset.get('name', '')))}"

    return message


def render_package(payload: dict, sender: str, repo: str) -> Optional[str]:
    package = payload.get("package")
    if not package:
        return None

    action = payload.get("action", "")
    emoji = {"published": "📦", "updated": "🔄"}.get(action, "📝")
    version = package.get("package_version") or {}
    message = (
        f"{emoji} <b>Package</b> {link(package.get('html_url'), escape_html(package.get('name', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📦 <b>Type:</b> {escape_html(package.get('package_type', ''))}\n"
    message += f"🏷️ <b>Version:</b> {escape_html(version.get('version') or package.get('version') or 'unknown')}"
    if package.get("description"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(package['description'])}"
    return message


# ---------------- Actions And Checks ----------------
def _workflow_details(run: dict) -> str:
    details = f"\n📋 <b>Branch:</b> <code>{escape_html(run.get('head_branch', ''))}</code>\n"
    details += f"🔢 <b>Run #:</b> {run.get('run_number')}\n"
    details += f"🎯 <b>Event:</b> {escape_html(run.get('event', ''))}"

    head_commit = run.get("head_commit")
    if head_commit:
        details += f"\n\n💾 <b>Commit:</b> {link(head_commit.get('url'), escape_html(head_commit.get('id', '')[:7]))}\n"
        details += f"📝 <b>Message:</b> <code>{escape_html(cut_down_text(head_commit.get('message', '')))}</code>"
    return details


def render_workflow_run(payload: dict, sender: str, repo: str) -> Optional[str]:
    run = payload.get("workflow_run")
    if not run:
        return None

    message = (
        f"{status_emoji(run.get('conclusion'), run.get('status'))} <b>Workflow Run</b> "
        f"{link(run.get('html_url'), escape_html(run.get('name', '')))} {escape_html(run.get('status', ''))}"
        f"{result_suffix(run.get('conclusion'))} by <b>{sender}</b> on {repo}\n"
    )
    return message + _workflow_details(run)


def render_workflow_dispatch(payload: dict, sender: str, repo: str) -> Optional[str]:
    workflow = payload.get("workflow", "")
    message = (
        f"🚀 <b>Workflow Dispatched</b> <code>{escape_html(workflow)}</code> "
        f"by <b>{sender}</b> on {repo}\n"
    )
    if payload.get("ref"):
        message += f"\n📋 <b>Ref:</b> <code>{escape_html(payload['ref'])}</code>"
    inputs = payload.get("inputs") or {}
    for name, value in inputs.items():
        message += f"\n• <b>{escape_html(name)}:</b> <code>{escape_html(str(value))}</code>"
    return message


def render_workflow_job(payload: dict, sender: str, repo: str) -> Optional[str]:
    job = payload.get("workflow_job")
    if not job:
        return None

    message = (
        f"{status_emoji(job.get('conclusion'), job.get('status'))} <b>Workflow Job</b> "
        f"{link(job.get('html_url'), escape_html(job.get('name', '')))} {escape_html(job.get('status', ''))}"
        f"{result_suffix(job.get('conclusion'))} on {repo}\n"
    )
    message += f"\n📋 <b>Workflow:</b> {escape_html(job.get('workflow_name', ''))}\n"
    message += f"🌿 <b>Branch:</b> <code>{escape_html(job.get('head_branch', ''))}</code>\n"
    message += f"🤖 <b>Runner:</b> {escape_html(job.get('runner_name') or 'pending')}"

    steps = job.get("steps") or []
    if steps:
        message += "\n\n📝 <b>Steps:</b>\n"
        for step in steps[:MAX_JOB_STEPS]:
            emoji = STATUS_EMOJI.get(step.get("conclusion"), "⏳")
            message += f" {emoji} {escape_html(step.get('name', ''))}\n"
        if len(steps) > MAX_JOB_STEPS:
            message += f" ... and {len(steps) - MAX_JOB_STEPS} more steps"

    return message


def render_check_suite(payload: dict, sender: str, repo: str) -> Optional[str]:
    suite = payload.get("check_suite")
    if not suite:
        return None

    message = (
        f"{status_emoji(suite.get('conclusion'), suite.get('status'))} <b>Check Suite</b> "
        f"{escape_html(suite.get('status', ''))}{result_suffix(suite.get('conclusion'))} on {repo}\n"
    )
    message += f"\n🌿 <b>Branch:</b> <code>{escape_html(suite.get('head_branch') or '')}</code>\n"
    message += f"💾 <b>Commit:</b> {commit_link(payload, suite.get('head_sha', ''))}\n"
    message += f"🔢 <b>Checks:</b> {suite.get('latest_check_runs_count', 0)}"
    return message


def render_check_run(payload: dict, sender: str, repo: str) -> Optional[str]:
    check_run = payload.get("check_run")
    if not check_run:
        return None

    message = (
        f"{status_emoji(check_run.get('conclusion'), check_run.get('status'))} <b>Check Run</b> "
        f"{link(check_run.get('html_url'), escape_html(check_run.get('name', '')))} "
        f"{escape_html(check_run.get('status', ''))}{result_suffix(check_run.get('conclusion'))} on {repo}\n"
    )

    output = check_run.get("output") or {}
    if output.get("title"):
        message += f"\n📝 <b>Title:</b> {escape_html(output['title'])}\n"
    summary = output.get("summary")
    if summary:
        message += f"\n📝 <b>Summary:</b> {escape_html(summary[:500])}"
        if len(summary) > 500:
            message += "..."
    return message


# ---------------- Deployments ----------------
def render_deployment(payload: dict, sender: str, repo: str) -> Optional[str]:
    deployment = payload.get("deployment")
    if not deployment:
        return None

    message = (
        f"🚀 <b>Deployment</b> {link(deployment.get('url'), escape_html(deployment.get('task', '')))} "
        f"created by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n🌿 <b>Branch:</b> <code>{escape_html(deployment.get('ref', ''))}</code>\n"
    message += f"📝 <b>Environment:</b> {escape_html(deployment.get('environment', ''))}\n"
    message += f"💾 <b>Commit:</b> {commit_link(payload, deployment.get('sha', ''))}"
    if deployment.get("description"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(deployment['description'])}"
    return message


DEPLOYMENT_STATE_EMOJI = {
    "success": "✅",
    "failure": "❌",
    "pending": "⏳",
    "error": "🚨",
}


def render_deployment_status(payload: dict, sender: str, repo: str) -> Optional[str]:
    status = payload.get("deployment_status")
    if not status:
        return None

    state = status.get("state", "")
    message = (
        f"{DEPLOYMENT_STATE_EMOJI.get(state, '🔄')} <b>Deployment Status</b> {escape_html(state)} "
        f"by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📝 <b>Environment:</b> {escape_html(status.get('environment', ''))}"
    if status.get("description"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(status['description'])}"
    if status.get("target_url"):
        message += f"\n\n🔗 {link(status['target_url'], 'View Deployment')}"
    return message


# ---------------- Discussions ----------------
DISCUSSION_EMOJI = {"created": "💬", "edited": "✏️"}


def render_discussion(payload: dict, sender: str, repo: str) -> Optional[str]:
    discussion = payload.get("discussion")
    if not discussion:
        return None

    action = payload.get("action", "")
    url = discussion.get("html_url")
    category = (discussion.get("category") or {}).get("name", "")
    message = (
        f"{DISCUSSION_EMOJI.get(action, '📝')} <b>Discussion</b> {link(url, escape_html(discussion.get('title', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📂 <b>Category:</b> {escape_html(category)}\n"
    message += f"💬 <b>Comments:</b> {discussion.get('comments', 0)}"
    if action == "created":
        message += quote_body(discussion.get("body"), url=url, label="View Full Discussion")
    return message


def render_discussion_comment(payload: dict, sender: str, repo: str) -> Optional[str]:
    comment = payload.get("comment") or payload.get("discussion_comment")
    if not comment:
        return None

    action = payload.get("action", "")
    url = comment.get("html_url")
    message = (
        f"{DISCUSSION_EMOJI.get(action, '📝')} <b>Discussion Comment</b> {link(url, escape_html(action))} "
        f"by <b>{sender}</b> on {repo}\n"
    )
    if action == "created":
        message += quote_body(comment.get("body"), url=url, label="View Full Comment")
    return message


# ---------------- Projects ----------------
def render_project(payload: dict, sender: str, repo: str) -> Optional[str]:
    project = payload.get("project")
    if not project:
        return None

    action = payload.get("action", "")
    emoji = {"created": "📋", "edited": "✏️", "closed": "✅", "reopened": "🔓"}.get(action, "📝")
    message = (
        f"{emoji} <b>Project</b> {link(project.get('html_url'), escape_html(project.get('name', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📝 <b>Number:</b> #{project.get('number')}\n"
    message += f"📊 <b>State:</b> {escape_html(project.get('state', ''))}"
    if project.get("body"):
        message += f"\n\n📝 <b>Description:</b> {escape_html(project['body'])}"
    return message


def render_project_card(payload: dict, sender: str, repo: str) -> Optional[str]:
    card = payload.get("project_card")
    if not card:
        return None

    action = payload.get("action", "")
    emoji = {"created": "📝", "edited": "✏️", "moved": "🔄", "converted": "🔄"}.get(action, "📋")
    message = f"{emoji} <b>Project Card</b> {escape_html(action)} by <b>{sender}</b> on {repo}\n"
    if card.get("column_name"):
        message += f"\n📋 <b>Column:</b> {escape_html(card['column_name'])}"
    if card.get("note"):
        message += f"\n\n📝 <b>Note:</b> {escape_html(card['note'])}"
    return message


def render_project_column(payload: dict, sender: str, repo: str) -> Optional[str]:
    column = payload.get("project_column")
    if not column:
        return None

    action = payload.get("action", "")
    emoji = {"created": "📋", "edited": "✏️", "moved": "🔄"}.get(action, "📝")
    return (
        f"{emoji} <b>Project Column</b> {link(column.get('url'), escape_html(column.get('name', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}"
    )


# ---------------- Security, Sponsors, Teams ----------------
SEVERITY_EMOJI = {
    "critical": "🚨",
    "high": "⚠️",
    "medium": "⚡",
    "low": "ℹ️",
}


def render_security_advisory(payload: dict, sender: str, repo: str) -> Optional[str]:
    advisory = payload.get("security_advisory")
    if not advisory:
        return None

    severity = advisory.get("severity", "")
    message = (
        f"{SEVERITY_EMOJI.get(severity, '📝')} <b>Security Advisory</b> {escape_html(payload.get('action', ''))} "
        f"by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n🚨 <b>Severity:</b> {escape_html(severity)}\n"
    message += f"📝 <b>Summary:</b> {escape_html(advisory.get('summary', ''))}"

    description = advisory.get("description")
    if description:
        message += f"\n\n📝 <b>Description:</b> {escape_html(description[:1000])}"
        if len(description) > 1000:
            message += "..."
    return message


def render_sponsorship(payload: dict, sender: str, repo: str) -> Optional[str]:
    sponsorship = payload.get("sponsorship")
    if not sponsorship:
        return None

    action = payload.get("action", "")
    emoji = {"created": "💖", "cancelled": "💔", "edited": "✏️"}.get(action, "💝")
    tier = sponsorship.get("tier") or {}
    message = f"{emoji} <b>Sponsorship</b> {escape_html(action)} by <b>{sender}</b> on {repo}\n"
    message += f"\n📝 <b>Sponsor:</b> {escape_html((sponsorship.get('sponsor') or {}).get('login', ''))}\n"
    message += f"🎯 <b>Sponsored:</b> {escape_html((sponsorship.get('sponsorable') or sponsorship.get('sponsee') or {}).get('login', ''))}\n"
    message += f"💰 <b>Tier:</b> {escape_html(tier.get('name', ''))}"
    if (tier.get("monthly_price_in_dollars") or 0) > 0:
        message += f" (${tier['monthly_price_in_dollars']}/month)"
    return message


def render_team(payload: dict, sender: str, repo: str) -> Optional[str]:
    team = payload.get("team")
    if not team:
        return None

    action = payload.get("action", "")
    emoji = {"created": "👥", "edited": "✏️"}.get(action, "📝")
    message = (
        f"{emoji} <b>Team</b> {link(team.get('html_url'), escape_html(team.get('name', '')))} "
        f"{escape_html(action)} by <b>{sender}</b> on {repo}\n"
    )
    message += f"\n📝 <b>Privacy:</b> {escape_html(team.get('privacy', ''))}\n"
    message += f"📝 <b>Description:</b> {escape_html(team.get('description') or 'No description')}"
    return message


# ---------------- Repository Activity ----------------
def render_star(payload: dict, sender: str, repo: str) -> Optional[str]:
    created = payload.get("action") == "created"
    return f"⭐ {sender} <b>{'added' if created else 'removed'}</b> a star {'to' if created else 'from'} {repo}"


def render_fork(payload: dict, sender: str, repo: str) -> Optional[str]:
    forkee = payload.get("forkee") or {}
    return f"🔄 {sender} created a {link(forkee.get('html_url'), 'fork')} from {repo}"


def render_gollum(payload: dict, sender: str, repo: str) -> Optional[str]:
    pages = payload.get("pages") or []
    message = f"📚 <b>Wiki</b> updated by <b>{sender}</b> on {repo}"
    for page in pages:
        message += (
            f"\n• {link(page.get('html_url'), escape_html(page.get('title', '')))} "
            f"{escape_html(page.get('action', ''))}"
        )
    return message


def render_member(payload: dict, sender: str, repo: str) -> Optional[str]:
    member = payload.get("member")
    if not member:
        return None
    return (
        f"👋 <b>Member</b> {link(member.get('html_url'), escape_html(member.get('login', '')))} "
        f"{escape_html(payload.get('action', ''))} by <b>{sender}</b> on {repo}"
    )


def render_public(payload: dict, sender: str, repo: str) -> Optional[str]:
    return f"🌍 <b>Repository</b> {repo} made public by <b>{sender}</b>"


def render_watch(payload: dict, sender: str, repo: str) -> Optional[str]:
    action = payload.get("action", "")
    emoji = "👀" if action == "started" else "📝"
    return f"{emoji} {sender} <b>{escape_html(action)}</b> watching {repo}"


RENDERERS: Dict[str, Renderer] = {
    "push": render_push,
    "create": render_create,
    "delete": render_delete,
    "commit_comment": render_commit_comment,
    "pull_request": render_pull_request,
    "pull_request_review": render_pull_request_review,
    "pull_request_review_comment": render_pull_request_review_comment,
    "issues": render_issues,
    "issue_comment": render_issue_comment,
    "milestone": render_milestone,
    "label": render_label,
    "release": render_release,
    "package": render_package,
    "workflow_run": render_workflow_run,
    "workflow_dispatch": render_workflow_dispatch,
    "workflow_job": render_workflow_job,
    "check_suite": render_check_suite,
    "check_run": render_check_run,
    "deployment": render_deployment,
    "deployment_status": render_deployment_status,
    "discussion": render_discussion,
    "discussion_comment": render_discussion_comment,
    "project": render_project,
    "project_card": render_project_card,
    "project_column": render_project_column,
    "security_advisory": render_security_advisory,
    "sponsorship": render_sponsorship,
    "team": render_team,
    "star": render_star,
    "fork": render_fork,
    "gollum": render_gollum,
    "member": render_member,
    "public": render_public,
    "watch": render_watch,
}


def render_event(event: str, payload: dict) -> Optional[str]:
    """
    Render A GitHub Webhook Delivery As A Telegram HTML Message.

    Args:
        event: Value Of The X-GitHub-Event Header
        payload: Decoded JSON Body

    Returns:
        The Message, Or None If The Event Is Not Relayed
    """
    renderer = RENDERERS.get(event)
    if renderer is None:
        logger.info(f"Unhandled GitHub Event: {event}")
        return None

    message = renderer(payload, format_sender(payload), format_repo(payload))
    if message is None:
        logger.info(f"Skipped GitHub Event {event} ({payload.get('action', 'no action')})")
    return message
