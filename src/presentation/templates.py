"""
HTML rendering for the acceptance pages.

One fixed rendering per AcceptanceFlow state; the full agreement is rendered
separately from the same flow's quote.
"""

from __future__ import annotations

import json
from datetime import datetime
from html import escape
from string import Template
from typing import Callable, Dict, Optional
from urllib.parse import urlencode

from src.presentation import legal_text
from src.presentation.acceptance_flow import AcceptanceFlow, FlowState

PAGE_SHELL = Template("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>$title</title>
  <style>
    :root {
      --bg: #0f0f0f;
      --surface: #1a1a1a;
      --border: #2a2a2a;
      --text: #e5e5e5;
      --muted: #9ca3af;
      --accent: #ADFF2F;
      --check: #2E8B57;
      --danger: #f87171;
    }
    body { margin: 0; background: var(--bg); color: var(--text); font-family: system-ui, -apple-system, sans-serif; }
    .container { max-width: 56rem; margin: 0 auto; padding: 3rem 1rem; }
    .centered { min-height: 100vh; display: flex; align-items: center; justify-content: center; padding: 1.5rem; }
    header.hero { display: flex; flex-direction: column; align-items: center; text-align: center; margin-bottom: 3rem; }
    header.hero img { width: 6rem; margin-bottom: 1.5rem; }
    header.hero h1 { font-size: 2.25rem; margin: 0 0 .5rem; }
    header.bar { display: flex; justify-content: space-between; align-items: center; padding-bottom: 1rem; border-bottom: 1px solid var(--border); margin-bottom: 2rem; }
    header.bar img { width: 2.5rem; margin-right: 1rem; vertical-align: middle; }
    .muted { color: var(--muted); }
    .card { background: var(--surface); border: 1px solid var(--border); border-radius: 1.5rem; padding: 2.5rem; line-height: 1.7; font-size: 1.1rem; }
    .legal { height: 65vh; overflow-y: auto; text-align: justify; font-size: 15px; }
    .legal h2 { text-align: center; text-transform: uppercase; letter-spacing: .2em; border-bottom: 1px solid var(--border); padding-bottom: 1.5rem; }
    .notice { margin-top: 4rem; padding-top: 2.5rem; border-top: 1px solid var(--border); font-size: 12px; font-style: italic; text-align: center; color: var(--muted); }
    a.accent { color: var(--accent); font-weight: bold; text-decoration: none; }
    a.accent:hover { text-decoration: underline; }
    form { margin-top: 2.5rem; border-top: 1px solid var(--border); padding-top: 2.5rem; }
    label.check { display: flex; align-items: flex-start; gap: 1rem; margin-bottom: 1.25rem; cursor: pointer; color: var(--muted); }
    label.check input { width: 1.5rem; height: 1.5rem; accent-color: var(--check); }
    button.primary { width: 100%; padding: 1.25rem; border: 0; border-radius: 1rem; font-size: 1.25rem; font-weight: bold; text-transform: uppercase; letter-spacing: .05em; background: var(--accent); color: #000; cursor: pointer; }
    button.primary:disabled { background: #1f2937; color: #4b5563; cursor: not-allowed; }
    .error { color: var(--danger); margin-top: 1rem; }
    .alert { border: 1px solid var(--danger); color: var(--danger); border-radius: 1rem; padding: 1rem 1.5rem; margin-bottom: 2rem; }
    footer { margin-top: 3rem; text-align: center; color: #4b5563; font-size: .75rem; letter-spacing: .2em; text-transform: uppercase; }
  </style>
</head>
<body>
$body
</body>
</html>
""")

OVERVIEW_BODY = Template("""<div class="container">
  $alert
  <header class="hero">
    <img src="$logo_url" alt="Logo">
    <h1>$title</h1>
    <p class="muted">$subtitle</p>
  </header>
  <div class="card">
    $paragraphs
  </div>
  <form method="post" action="$accept_url">
    <input type="hidden" name="record_id" value="$record_id">
    <label class="check"><input type="checkbox" name="accepted_terms" value="on" required> <span>$accept_label</span></label>
    <label class="check"><input type="checkbox" name="authorized" value="on" required> <span>$authorized_label</span></label>
    <button type="submit" class="primary" $disabled>$button_label</button>
    $error
  </form>
  $footer
</div>
<script>
  (function () {
    var form = document.querySelector("form");
    var button = form.querySelector("button");
    if (button.hasAttribute("disabled")) { return; }
    var boxes = form.querySelectorAll("input[type=checkbox]");
    function sync() { button.disabled = !Array.prototype.every.call(boxes, function (b) { return b.checked; }); }
    Array.prototype.forEach.call(boxes, function (b) { b.addEventListener("change", sync); });
    form.addEventListener("submit", function () { button.disabled = true; button.textContent = "Processing..."; });
    sync();
  })();
</script>
$alert_script""")

TERMS_BODY = Template("""<div class="container">
  <header class="bar">
    <div><img src="$logo_url" alt="Logo"><strong>$title</strong></div>
    <a class="accent" href="$overview_url">&larr; BACK TO OVERVIEW</a>
  </header>
  <div class="card legal">
    <h2>$heading</h2>
    $content
    <div class="notice">$notice</div>
  </div>
  $footer
</div>""")

ACCEPTED_BODY = Template("""<div class="centered">
  <div class="card" style="max-width: 28rem; text-align: center;">
    <div style="font-size: 3rem; color: var(--accent);">&#10003;</div>
    <h2>$title</h2>
    <p class="muted">$message</p>
    <div class="muted" style="font-size: .8rem; letter-spacing: .2em; text-transform: uppercase;">$company</div>
  </div>
</div>""")

BUTTON_LABELS = {
    FlowState.LOADING: "Loading...",
    FlowState.LOADED: "Accept &amp; Continue",
    FlowState.ERROR: "Accept &amp; Continue",
    FlowState.SUBMITTING: "Processing...",
}


def _url(path: str, record_id: Optional[str]) -> str:
    return f"{path}?{urlencode({'id': record_id})}" if record_id else path


def _footer(year: Optional[int] = None) -> str:
    year = year or datetime.now().year
    return f"<footer>&copy; {year} {escape(legal_text.COMPANY_LEGAL_NAME)}. All rights reserved.</footer>"


def _page(title: str, body: str) -> str:
    return PAGE_SHELL.substitute(title=escape(title), body=body)


def _alert_script(message: Optional[str]) -> str:
    if not message:
        return ""
    return "<script>alert(%s);</script>" % json.dumps(message).replace("</", "<\\/")


def render_overview(flow: AcceptanceFlow, accept_url: str = "/accept", terms_path: str = "/terms") -> str:
    terms_link = Template(legal_text.TERMS_LINK_PARAGRAPH).substitute(terms_url=escape(_url(terms_path, flow.record_id)))
    paragraphs = "\n    ".join(f"<p>{p}</p>" for p in (*legal_text.OVERVIEW_PARAGRAPHS, terms_link))
    body = OVERVIEW_BODY.substitute(
        alert=f'<div class="alert" role="alert">{escape(flow.alert)}</div>' if flow.alert else "",
        logo_url=legal_text.LOGO_URL,
        title=escape(legal_text.OVERVIEW_TITLE),
        subtitle=escape(legal_text.OVERVIEW_SUBTITLE),
        paragraphs=paragraphs,
        accept_url=escape(accept_url),
        record_id=escape(flow.record_id or ""),
        accept_label=escape(legal_text.ACCEPT_TERMS_LABEL),
        authorized_label=escape(legal_text.AUTHORIZED_LABEL),
        disabled="" if flow.can_submit else "disabled",
        button_label=BUTTON_LABELS[flow.state],
        error=f'<p class="error">{escape(flow.error)}</p>' if flow.error else "",
        footer=_footer(),
        alert_script=_alert_script(flow.alert),
    )
    return _page(legal_text.OVERVIEW_TITLE, body)


def render_accepted(flow: AcceptanceFlow) -> str:
    body = ACCEPTED_BODY.substitute(
        title=escape(legal_text.ACCEPTED_TITLE),
        message=escape(legal_text.ACCEPTED_MESSAGE),
        company=escape(legal_text.COMPANY_LEGAL_NAME),
    )
    return _page(legal_text.ACCEPTED_TITLE, body)


STATE_RENDERERS: Dict[FlowState, Callable[[AcceptanceFlow], str]] = {
    FlowState.LOADING: render_overview,
    FlowState.LOADED: render_overview,
    FlowState.ERROR: render_overview,
    FlowState.SUBMITTING: render_overview,
    FlowState.SUBMITTED: render_accepted,
}


def render_flow(flow: AcceptanceFlow) -> str:
    return STATE_RENDERERS[flow.state](flow)


def render_terms(flow: AcceptanceFlow, overview_path: str = "/") -> str:
    quote_values = {name: escape(value) for name, value in flow.quote.model_dump().items()}
    blocks = [f"<p>{Template(p).substitute(quote_values)}</p>" for p in legal_text.AGREEMENT_PREAMBLE]
    for heading, clauses in legal_text.AGREEMENT_SECTIONS:
        blocks.append(f"<h3>{escape(heading)}</h3>")
        for label, text in clauses:
            blocks.append(f"<p><b>{escape(label)}</b> {Template(text).substitute(quote_values)}</p>")
    if flow.error:
        blocks.insert(0, f'<p class="error">{escape(flow.error)}</p>')

    body = TERMS_BODY.substitute(
        logo_url=legal_text.LOGO_URL,
        title=escape(legal_text.AGREEMENT_TITLE),
        overview_url=escape(_url(overview_path, flow.record_id)),
        heading=escape(legal_text.AGREEMENT_HEADING),
        content="\n    ".join(blocks),
        notice=legal_text.LEGAL_NOTICE,
        footer=_footer(),
    )
    return _page(legal_text.AGREEMENT_TITLE, body)
