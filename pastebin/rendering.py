"""
Server-rendered HTML pages.

Stored content is user input and is always passed through ``escape_html``
before it is embedded in markup.
"""
from typing import Optional

from pastebin.models import Record, format_timestamp
from pastebin.variants import VariantPolicy

_STYLE = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 20px;
        }
        .container {
            background: white;
            border-radius: 10px;
            box-shadow: 0 10px 40px rgba(0, 0, 0, 0.3);
            max-width: 900px;
            width: 100%;
            padding: 40px;
        }
        h1 { color: #333; margin-bottom: 10px; font-size: 24px; }
        .meta { color: #666; font-size: 12px; margin-bottom: 20px; font-family: monospace; word-break: break-all; }
        .content, textarea {
            background: #f5f5f5;
            border: 1px solid #ddd;
            border-radius: 5px;
            padding: 20px;
            font-family: "Courier New", monospace;
            font-size: 14px;
            line-height: 1.6;
            white-space: pre-wrap;
            word-wrap: break-word;
            color: #333;
            width: 100%;
        }
        .content { max-height: 500px; overflow-y: auto; }
        label { display: block; margin: 15px 0 5px; color: #333; font-size: 14px; }
        input { padding: 8px; border: 1px solid #ddd; border-radius: 5px; width: 200px; }
        button, .button {
            display: inline-block;
            margin-top: 20px;
            background: #667eea;
            color: white;
            padding: 12px 30px;
            border: none;
            border-radius: 5px;
            text-decoration: none;
            font-weight: 600;
            cursor: pointer;
        }
        #result { margin-top: 20px; font-family: monospace; word-break: break-all; }
        .footer { margin-top: 20px; text-align: center; color: #999; font-size: 12px; }
        .footer a { color: #667eea; text-decoration: none; }
        .error { text-align: center; }
        .error h1 { font-size: 48px; color: #667eea; margin-bottom: 20px; }
        .error p { color: #666; font-size: 16px; margin-bottom: 10px; line-height: 1.6; }
"""


def escape_html(text: str) -> str:
    """Escape HTML metacharacters so text renders inert inside markup."""
    return (
        text
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape_html(title)} - Pastebin Lite</title>
    <style>{_STYLE}</style>
</head>
<body>
    <div class="container">
{body}
    </div>
</body>
</html>"""


def _describe_limits(policy: VariantPolicy, record: Record) -> str:
    parts = []
    if policy.distinguishes_gone:
        if record.max_views is not None:
            parts.append(f"Views: {record.view_count} / {record.max_views}")
        else:
            parts.append(f"Views: {record.view_count}")
    elif record.remaining_views is not None:
        parts.append(f"Remaining views: {record.remaining_views}")

    expires_at: Optional[str] = format_timestamp(record.expires_at)
    if expires_at:
        parts.append(f"Expires: {expires_at}")
    return " &middot; ".join(parts)


def render_record_page(policy: VariantPolicy, record: Record) -> str:
    """Render a viewed record."""
    limits = _describe_limits(policy, record)
    limits_html = f'\n        <div class="meta">{limits}</div>' if limits else ""
    body = f"""        <h1>📋 Pastebin Lite</h1>
        <div class="meta">ID: {escape_html(record.id)}</div>{limits_html}
        <div class="content">{escape_html(record.content)}</div>
        <div class="footer">
            <p><a href="/">Create a new {policy.name}</a></p>
        </div>"""
    return _page(policy.label, body)


def render_error_page(policy: VariantPolicy, status_code: int, message: str) -> str:
    """Render the page shown for unknown, expired or exhausted records."""
    if status_code == 410:
        detail = f"This {policy.name} has expired or its view limit has been reached."
    elif status_code == 404:
        detail = f"This {policy.name} was not found, has expired, or its view limit has been exceeded."
    else:
        detail = "Something went wrong. Please try again later."
    body = f"""        <div class="error">
            <h1>{status_code}</h1>
            <p>{escape_html(message)}</p>
            <p>{detail}</p>
            <a class="button" href="/">Create a new {policy.name}</a>
        </div>"""
    return _page(message, body)


def render_create_page() -> str:
    """Render the create form; it posts JSON to the paste API."""
    body = """        <h1>📋 Pastebin Lite</h1>
        <form id="create-form">
            <label for="content">Content</label>
            <textarea id="content" name="content" rows="12" required></textarea>
            <label for="ttl_seconds">Expire after (seconds, optional)</label>
            <input id="ttl_seconds" name="ttl_seconds" type="number" min="1">
            <label for="max_views">Maximum views (optional)</label>
            <input id="max_views" name="max_views" type="number" min="1">
            <div><button type="submit">Create paste</button></div>
        </form>
        <div id="result"></div>
        <script>
            document.getElementById("create-form").addEventListener("submit", async (event) => {
                event.preventDefault();
                const form = event.target;
                const body = { content: form.content.value };
                if (form.ttl_seconds.value) body.ttl_seconds = Number(form.ttl_seconds.value);
                if (form.max_views.value) body.max_views = Number(form.max_views.value);
                const response = await fetch("/api/pastes", {
                    method: "POST",
                    headers: { "Content-Type": "application/json" },
                    body: JSON.stringify(body),
                });
                const data = await response.json();
                const result = document.getElementById("result");
                result.textContent = response.ok ? data.url : data.error;
            });
        </script>"""
    return _page("Create", body)
