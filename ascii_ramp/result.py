"""
ASCII Art Result Container

Provides the ASCIIResult dataclass returned by every conversion, covering
both real renders and fallback blocks, with terminal display, HTML export,
and a JSON-friendly dict form.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime
import html


@dataclass
class ASCIIResult:
    """
    Container for a conversion result.

    Attributes:
        text: The rendered text, one "\\n"-terminated line per row
        is_fallback: True when the placeholder block was produced instead
        metadata: Conversion parameters and timings
    """
    text: str
    is_fallback: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> List[str]:
        """Rows of the artifact, without their terminating newlines."""
        lines = self.text.split('\n')
        if lines and lines[-1] == '':
            lines.pop()
        return lines

    @property
    def width(self) -> int:
        """Width in characters."""
        lines = self.lines
        return max(len(line) for line in lines) if lines else 0

    @property
    def height(self) -> int:
        """Height in lines."""
        return len(self.lines)

    @property
    def success(self) -> bool:
        return not self.is_fallback

    def display(self, max_width: Optional[int] = None):
        """
        Print the art to the terminal.

        Args:
            max_width: Maximum width to display (truncates if needed)
        """
        if max_width:
            for line in self.lines:
                print(line[:max_width])
        else:
            print(self.text, end='')

    def to_html(
        self,
        font_family: str = "Menlo, Monaco, 'Courier New', monospace",
        font_size: str = "10px",
        bg_color: str = "#000000",
        fg_color: str = "#00ff41",
        title: str = "ASCII Art",
    ) -> str:
        """
        Convert the art to a styled HTML page.

        Returns:
            Complete HTML document string
        """
        escaped_text = html.escape(self.text)

        meta_html = ""
        if self.metadata:
            meta_items = [
                f"<li><strong>{html.escape(str(key))}:</strong> {html.escape(str(value))}</li>"
                for key, value in self.metadata.items()
            ]
            meta_html = f"""
        <div class="metadata">
            <h3>Conversion Details</h3>
            <ul>{''.join(meta_items)}</ul>
        </div>
"""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            background-color: {bg_color};
            color: {fg_color};
            font-family: {font_family};
            font-size: {font_size};
            line-height: 1.0;
            padding: 20px;
            margin: 0;
        }}
        pre {{
            margin: 0;
            white-space: pre;
            overflow-x: auto;
        }}
        .metadata {{
            margin-top: 20px;
            padding-top: 20px;
            border-top: 1px solid #444;
            font-size: 12px;
        }}
        .metadata ul {{
            list-style: none;
            padding: 0;
        }}
    </style>
</head>
<body>
    <pre>{escaped_text}</pre>
{meta_html}
</body>
</html>"""

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form: ``{success, ascii, fallback, metadata}``."""
        return {
            'success': self.success,
            'ascii': self.text,
            'fallback': self.is_fallback,
            'metadata': dict(self.metadata),
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the art."""
        lines = self.lines
        char_count = sum(len(line) for line in lines)
        unique_chars = set(self.text.replace('\n', ''))

        return {
            'width': self.width,
            'height': self.height,
            'total_characters': char_count,
            'unique_characters': len(unique_chars),
            'fallback': self.is_fallback,
        }

    def __repr__(self) -> str:
        return f"ASCIIResult(width={self.width}, height={self.height}, fallback={self.is_fallback})"

    def __str__(self) -> str:
        return self.text


def create_result(
    text: str,
    is_fallback: bool = False,
    ramp: Optional[str] = None,
    backend: Optional[str] = None,
    **extra_metadata
) -> ASCIIResult:
    """
    Factory function to create an ASCIIResult with standard metadata.

    Args:
        text: Rendered text
        is_fallback: Whether this is the placeholder block
        ramp: Ramp name used
        backend: Rasterizer backend used
        **extra_metadata: Additional metadata

    Returns:
        Configured ASCIIResult
    """
    metadata = {
        'generated_at': datetime.now().isoformat(),
    }

    if ramp:
        metadata['ramp'] = ramp
    if backend:
        metadata['backend'] = backend

    metadata.update(extra_metadata)

    return ASCIIResult(
        text=text,
        is_fallback=is_fallback,
        metadata=metadata,
    )
