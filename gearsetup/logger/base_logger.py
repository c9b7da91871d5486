"""Base logging functionality for algorithm tracing and debugging."""

import html
import logging
from pathlib import Path
from typing import Any, cast, Callable, TypeVar, Union
from functools import wraps

F = TypeVar("F", bound=Callable[..., Any])

CSS_LOG = """
body { font-family: sans-serif; margin: 2em; }
.section { border-top: 1px solid #ccc; margin-top: 1.5em; }
.info { margin: 0.2em 0; }
.error { color: #d9534f; }
.debug { color: #777; }
.result { background: #f5f5f5; padding: 0.3em 0.6em; }
pre { background: #fafafa; padding: 0.5em; }
"""


class AlgorithmLogger:
    """Base logger class for algorithm tracing and debugging."""

    def __init__(self, name: str):
        self.name = name
        self.disabled = False
        self._html_content = ['<div class="content">']
        self._css_content: list[str] = [CSS_LOG]
        self._section_open = False

        self.logger = logging.getLogger(name)

        # Only add a default StreamHandler if no handlers exist, so loggers
        # sharing a name do not duplicate output.
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(message)s")
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)
            self.logger.propagate = False
        elif self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

    def section(self, title: str):
        """Create a new section in the log."""
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

        self.logger.info(f"\n{'=' * 20} {title} {'=' * 20}\n")
        self._html_content.append(
            f'<section class="section"><h3>{html.escape(title)}</h3>'
        )
        self._section_open = True

    def info(self, message: str):
        """Log info message."""
        if self.disabled:
            return
        self.logger.info(message)
        self._html_content.append(f'<p class="info">{html.escape(message)}</p>')

    def error(self, message: str):
        """Log an error message."""
        if self.disabled:
            return
        self.logger.error(message)
        self._html_content.append(f'<p class="error">{html.escape(message)}</p>')

    def debug(self, message: str):
        """Log debug message."""
        if self.disabled:
            return
        self.logger.debug(message)
        self._html_content.append(f'<p class="debug">{html.escape(message)}</p>')

    def result(self, label: str, value: Any):
        """Log a result with a label."""
        if self.disabled:
            return
        self.logger.info(f"{label}: {value}")
        self._html_content.append(
            f'<div class="result"><strong>{html.escape(label)}:</strong> '
            f"{html.escape(str(value))}</div>"
        )

    def raw_html(self, html_content: str):
        """Add raw HTML content to the debug output."""
        if self.disabled:
            return
        self._html_content.append(html_content)

    def end_section(self):
        """End the current section."""
        if self.disabled:
            return
        if self._section_open:
            self._html_content.append("</section>")
            self._section_open = False

    def clear(self):
        """Clear all accumulated content."""
        self._html_content = ['<div class="content">']
        self._css_content = [CSS_LOG]
        self._section_open = False

    def get_html_content(self) -> str:
        """Get the accumulated HTML content."""
        # Build a snapshot without mutating internal buffers
        parts = list(self._html_content)
        if self._section_open:
            parts.append("</section>")
        parts.append("</div>")
        return "\n".join(parts)

    def get_css_content(self) -> str:
        """Get the accumulated CSS content."""
        return "\n".join(self._css_content)

    def write_html(self, path: Union[str, Path], title: str = "") -> Path:
        """Write the accumulated transcript as a standalone HTML page."""
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        page = (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{html.escape(title or self.name)}</title>\n"
            f"<style>{self.get_css_content()}</style>\n</head>\n<body>\n"
            f"{self.get_html_content()}\n</body>\n</html>\n"
        )
        output.write_text(page, encoding="utf-8")
        return output

    def log_execution(self, func: F) -> F:
        """Decorator for logging function execution with type safety."""

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.section(f"Executing {func.__name__}")
            try:
                result = func(*args, **kwargs)
                self.info(f"{func.__name__} completed successfully")
                return result
            except Exception as e:
                self.info(f"Error in {func.__name__}: {str(e)}")
                raise

        return cast(F, wrapper)
