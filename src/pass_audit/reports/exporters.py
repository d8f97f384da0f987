"""Multi-format exporters for check, generation and edit results.

Supports:

*  **JSON** — machine-readable, schema-validated.
*  **Markdown** — human-readable, suitable for notes and tickets.
*  **HTML** — self-contained HTML document with embedded CSS, laid out
   with password-output, strength-meter and feedback blocks.
*  **Text** — terminal summary.

All exporters accept a result object and produce a string.
"""

from __future__ import annotations

import html as html_mod
from typing import Union

from pass_audit.model.result import (
    AnalysisResult,
    CheckResult,
    EditResult,
    GeneratedPassword,
    GenerationResult,
)
from pass_audit.utils.json_norm import stable_json_dumps

Result = Union[CheckResult, GenerationResult, EditResult]

EXPORT_FORMATS = ("text", "json", "markdown", "html")

_TIER_EMOJI = {"green": "🟢", "yellow": "🟡", "red": "🔴"}

_STRONG_MESSAGE = "Your password looks strong!"


def _has_common(analysis: AnalysisResult) -> bool:
    return analysis.is_common or bool(analysis.common_elements)


# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(result: Result, *, ci_mode: bool = False, indent: int = 2) -> str:
    """Export a result as canonical indented JSON."""
    return stable_json_dumps(result.to_dict(), ci_mode=ci_mode, indent=indent)


# ════════════════════════════════════════════════════════════════════
# Text exporter
# ════════════════════════════════════════════════════════════════════


def _text_analysis(analysis: AnalysisResult, indent: str = "   ") -> list[str]:
    emoji = _TIER_EMOJI.get(analysis.tier.value, "⚪")
    lines = [
        f"{indent}{emoji} Strength: {analysis.strength.text} "
        f"({analysis.strength.score}/100, {analysis.tier.value.upper()})",
        f"{indent}Length   : {analysis.length} characters",
    ]
    if analysis.is_common:
        lines.append(f"{indent}❌ Found in common passwords database!")
    elif analysis.common_elements:
        lines.append(f"{indent}⚠️ Contains common password elements")
    else:
        lines.append(f"{indent}✅ Not in common passwords database")
    if analysis.weak_patterns.detected:
        lines.append(
            f"{indent}⚠️ Weak patterns detected: {', '.join(analysis.weak_patterns.issues)}"
        )
    else:
        lines.append(f"{indent}✅ No obvious weak patterns detected")
    return lines


def _text_generated(item: GeneratedPassword) -> list[str]:
    return [f"{item.label} Style: {item.password}", *_text_analysis(item.analysis)]


def export_text(result: Result) -> str:
    """Export a result as a plain terminal summary."""
    lines: list[str] = []
    if isinstance(result, CheckResult):
        lines.append("Password Analysis Results")
        lines.extend(_text_analysis(result.analysis))
        if result.analysis.suggestions:
            lines.append("")
            lines.append("Recommendations for Improvement:")
            lines.extend(f"   • {s}" for s in result.analysis.suggestions)
        else:
            lines.append("")
            lines.append(f"{_STRONG_MESSAGE} 🎉")
    elif isinstance(result, GenerationResult):
        if len(result.passwords) > 1:
            lines.append("Password Variations:")
        for item in result.passwords:
            lines.append("")
            lines.extend(_text_generated(item))
    else:
        lines.append("Detailed Analysis:")
        lines.append(f"   {result.analysis.summary}")
        lines.append("")
        lines.append("Improved Versions:")
        for item in result.improved:
            lines.append("")
            lines.extend(_text_generated(item))
    lines.append("")
    return "\n".join(lines)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def _md_analysis(analysis: AnalysisResult) -> list[str]:
    weak = (
        ", ".join(analysis.weak_patterns.issues)
        if analysis.weak_patterns.detected
        else "none"
    )
    return [
        "| Check | Result |",
        "|-------|--------|",
        f"| Strength | {analysis.strength.text} ({analysis.strength.score}/100) |",
        f"| Tier | {analysis.tier.value.upper()} |",
        f"| Length | {analysis.length} characters |",
        f"| Common password | {'yes' if analysis.is_common else 'no'} |",
        f"| Common elements | {', '.join(analysis.common_elements) or 'none'} |",
        f"| Weak patterns | {weak} |",
        "",
    ]


def _md_generated(item: GeneratedPassword) -> list[str]:
    return [f"### {item.label} Style", "", f"`{item.password}`", "", *_md_analysis(item.analysis)]


def export_markdown(result: Result) -> str:
    """Export a result as a concise Markdown document."""
    lines: list[str] = []
    if isinstance(result, CheckResult):
        lines.extend(["# Password Analysis Results", ""])
        lines.extend(_md_analysis(result.analysis))
        if result.analysis.suggestions:
            lines.extend(["## Recommendations for Improvement", ""])
            lines.extend(f"- {s}" for s in result.analysis.suggestions)
            lines.append("")
        else:
            lines.extend([f"**{_STRONG_MESSAGE}**", ""])
    elif isinstance(result, GenerationResult):
        title = "Password Variations" if len(result.passwords) > 1 else "Generated Password"
        lines.extend([f"# {title}", ""])
        for item in result.passwords:
            lines.extend(_md_generated(item))
    else:
        lines.extend(["# Detailed Analysis", "", result.analysis.summary, ""])
        lines.extend(["## Improved Versions", ""])
        for item in result.improved:
            lines.extend(_md_generated(item))

    lines.append("---")
    lines.append(f"*Exported by pass-audit {result.run.tool_version}*")
    lines.append("")
    return "\n".join(lines)


# ════════════════════════════════════════════════════════════════════
# HTML exporter
# ════════════════════════════════════════════════════════════════════

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Password Security Report</title>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 2rem; color: #2c3e50; }}
  .password-output {{ background: #f8f9fa; padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }}
  .password-value {{ font-size: 1.2em; color: #2c3e50; font-family: monospace; }}
  .strength-meter {{ height: 10px; background: #e9ecef; border-radius: 5px; margin: 0.5rem 0; }}
  .strength-fill {{ height: 100%; border-radius: 5px; }}
  .strength-very-weak {{ background: #dc3545; }}
  .strength-weak {{ background: #fd7e14; }}
  .strength-medium {{ background: #ffc107; }}
  .strength-strong {{ background: #20c997; }}
  .strength-very-strong {{ background: #28a745; }}
  .feedback {{ padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }}
  .feedback.success {{ background: #d4edda; }}
  .feedback.warning {{ background: #fff3cd; }}
  .feedback.danger {{ background: #f8d7da; }}
  .suggestions {{ background: #e9ecef; padding: 1rem; border-radius: 6px; }}
  footer {{ margin-top: 2rem; color: #6c757d; font-size: 0.85em; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def _e(value: object) -> str:
    return html_mod.escape(str(value), quote=True)


def _html_meter(analysis: AnalysisResult) -> str:
    return (
        '<div class="strength-meter">'
        f'<div class="strength-fill {_e(analysis.strength.css_class)}" '
        f'style="width: {analysis.strength.score}%"></div>'
        "</div>"
    )


def _html_single(item: GeneratedPassword) -> list[str]:
    a = item.analysis
    common = (
        "⚠️ Contains common password elements"
        if _has_common(a)
        else "✅ No common password patterns detected"
    )
    weak = (
        "⚠️ Contains: " + _e(", ".join(a.weak_patterns.issues))
        if a.weak_patterns.detected
        else "✅ No obvious weak patterns detected"
    )
    return [
        '<div class="password-output">',
        "<strong>Generated Password:</strong><br>",
        f'<span class="password-value">{_e(item.password)}</span>',
        "</div>",
        _html_meter(a),
        f'<div class="feedback {_e(a.security_level.value)}">',
        f"<strong>Strength: {_e(a.strength.text)}</strong><br>",
        f"Length: {a.length} characters<br>",
        f"{common}<br>",
        weak,
        "</div>",
    ]


def _html_list(title: str, items: list[GeneratedPassword]) -> list[str]:
    parts = [f"<h3>{_e(title)}</h3>"]
    for item in items:
        a = item.analysis
        note = "(Contains common elements)" if _has_common(a) else "(Unique patterns)"
        parts.extend([
            '<div class="password-output">',
            f"<strong>{_e(item.label)} Style:</strong><br>",
            f'<span class="password-value">{_e(item.password)}</span>',
            _html_meter(a),
            f"<small><strong>Security:</strong> {_e(a.strength.text)} {note}</small>",
            "</div>",
        ])
    return parts


def _html_check(analysis: AnalysisResult) -> list[str]:
    common = (
        "❌ Found in common passwords database!"
        if analysis.is_common
        else "✅ Not in common passwords database"
    )
    weak = (
        "⚠️ Weak patterns detected: " + _e(", ".join(analysis.weak_patterns.issues))
        if analysis.weak_patterns.detected
        else "✅ No obvious weak patterns detected"
    )
    parts = [
        _html_meter(analysis),
        f'<div class="feedback {_e(analysis.security_level.value)}">',
        "<strong>Password Analysis Results</strong><br><br>",
        f"<strong>Strength: {_e(analysis.strength.text)}</strong><br>",
        f"Length: {analysis.length} characters<br>",
        f"{common}<br>",
        weak,
        "</div>",
    ]
    if analysis.suggestions:
        parts.append('<div class="suggestions">')
        parts.append("<strong>Recommendations for Improvement:</strong>")
        parts.append("<ul>")
        parts.extend(f"<li>{_e(s)}</li>" for s in analysis.suggestions)
        parts.append("</ul>")
        parts.append("</div>")
    else:
        parts.append(
            f'<div class="feedback success"><strong>{_STRONG_MESSAGE}</strong> 🎉</div>'
        )
    return parts


def export_html(result: Result) -> str:
    """Export a result as a self-contained HTML document.

    Every user-supplied or generated string is escaped.
    """
    parts: list[str] = ["<h1>Password Security Report</h1>"]
    if isinstance(result, CheckResult):
        parts.extend(_html_check(result.analysis))
    elif isinstance(result, GenerationResult):
        if len(result.passwords) == 1:
            parts.extend(_html_single(result.passwords[0]))
        else:
            parts.extend(_html_list("Password Variations:", result.passwords))
    else:
        parts.extend([
            '<div class="feedback warning">',
            "<strong>Detailed Analysis:</strong><br>",
            _e(result.analysis.summary),
            "</div>",
        ])
        parts.extend(_html_list("Improved Versions:", result.improved))

    parts.append(f"<footer>Exported by pass-audit {_e(result.run.tool_version)}</footer>")
    return _HTML_TEMPLATE.format(body="\n".join(parts))


# ════════════════════════════════════════════════════════════════════
# Dispatcher
# ════════════════════════════════════════════════════════════════════


def export_result(result: Result, fmt: str = "text", *, ci_mode: bool = False) -> str:
    """Export a result in the specified format.

    Raises
    ------
    ValueError
        If *fmt* is not recognised.
    """
    if fmt == "json":
        return export_json(result, ci_mode=ci_mode)
    if fmt == "markdown":
        return export_markdown(result)
    if fmt == "html":
        return export_html(result)
    if fmt == "text":
        return export_text(result)
    raise ValueError(f"Unknown export format: {fmt!r} (use text|json|markdown|html)")
