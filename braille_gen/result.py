"""
Render Result Containers

RenderResult holds generated text plus metadata, with helpers for
terminal display, HTML export and file saving. RenderFailure is the
other half of the tagged result returned by BrailleArtGenerator.generate.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union
import html

from .budget import payload_size
from .errors import FailureKind


@dataclass
class RenderResult:
    """
    Container for generated art.

    Attributes:
        text: Newline-terminated rows
        adjusted_width: Effective width after byte-budget fitting
            (Braille path only)
        metadata: Generation parameters and measurements
    """
    text: str
    adjusted_width: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    ok = True

    @property
    def lines(self):
        return self.text.splitlines()

    @property
    def width(self) -> int:
        """Width in characters."""
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        """Height in lines."""
        return len(self.lines)

    @property
    def char_count(self) -> int:
        """Characters excluding line breaks."""
        return sum(len(line) for line in self.lines)

    @property
    def byte_size(self) -> int:
        """UTF-8 bytes of the row characters."""
        return payload_size(self.text)

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

    def save(self, path: str, format: str = "auto") -> str:
        """
        Save the art to a file.

        Args:
            path: Output file path
            format: "txt", "html", "png", or "auto" (detect from extension)

        Returns:
            The path written
        """
        if format == "auto":
            lower = str(path).lower()
            if lower.endswith('.html') or lower.endswith('.htm'):
                format = "html"
            elif lower.endswith('.png'):
                format = "png"
            else:
                format = "txt"

        if format == "png":
            from .exporter import render_text_to_image
            return render_text_to_image(self.text, path)

        content = self.to_html() if format == "html" else self.text
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return str(path)

    def to_html(
        self,
        font_family: str = "'DejaVu Sans Mono', Menlo, monospace",
        font_size: str = "10px",
        bg_color: str = "#1e1e1e",
        fg_color: str = "#d4d4d4",
        title: str = "Braille Art",
    ) -> str:
        """Wrap the art in a minimal styled HTML page."""
        escaped_text = html.escape(self.text)

        meta_html = ""
        if self.metadata:
            items = ''.join(
                f"<li><strong>{html.escape(str(key))}:</strong> {html.escape(str(value))}</li>"
                for key, value in self.metadata.items()
            )
            meta_html = f"""
        <div class="metadata">
            <ul>{items}</ul>
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
        }}
        .metadata {{
            margin-top: 20px;
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

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the art."""
        return {
            'width': self.width,
            'height': self.height,
            'total_characters': self.char_count,
            'unique_characters': len(set(self.text.replace('\n', ''))),
            'bytes': self.byte_size,
            'adjusted_width': self.adjusted_width,
        }

    def __repr__(self) -> str:
        return f"RenderResult(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RenderFailure:
    """A render that could not run, with the reason."""
    kind: FailureKind
    message: str

    ok = False

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


GenerateOutcome = Union[RenderResult, RenderFailure]


def create_result(
    text: str,
    adjusted_width: Optional[int] = None,
    charset: Optional[str] = None,
    **extra_metadata
) -> RenderResult:
    """
    Factory function to create a RenderResult with standard metadata.

    Args:
        text: Rendered rows
        adjusted_width: Effective Braille width, if fitted
        charset: Charset option used
        **extra_metadata: Additional metadata

    Returns:
        Configured RenderResult
    """
    metadata = {
        'generated_at': datetime.now().isoformat(),
    }
    if charset:
        metadata['charset'] = charset

    metadata.update(extra_metadata)

    return RenderResult(text=text, adjusted_width=adjusted_width, metadata=metadata)
