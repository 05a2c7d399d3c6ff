"""Static extension-to-category table."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class ExtensionRecord:
    """Classification of a single file extension."""

    category: str
    alternate_name: Optional[str] = None
    sort_directory: Optional[str] = None

    def __post_init__(self):
        if not self.category:
            raise ValueError("Extension record category must not be empty")


# (extension, (category, alternate_name, sort_directory))
_BUILTIN_EXTENSIONS = (
    # Images
    ("jpg", ("image", "photo", "jpeg")),
    ("jpeg", ("image", "photo", None)),
    ("png", ("image", None, None)),
    ("gif", ("image", "animated", None)),
    ("bmp", ("image", "bitmap", None)),
    ("tif", ("image", None, "tiff")),
    ("tiff", ("image", None, None)),
    ("webp", ("image", None, None)),
    ("heic", ("image", "photo", None)),
    ("svg", ("image", "vector", None)),
    ("ico", ("image", "icon", None)),
    ("psd", ("image", "project", "photoshop")),
    ("xcf", ("image", "project", "gimp")),
    ("cr2", ("image", "raw", None)),
    ("nef", ("image", "raw", None)),
    ("arw", ("image", "raw", None)),
    ("dng", ("image", "raw", None)),
    # Video
    ("mp4", ("video", None, None)),
    ("m4v", ("video", None, "mp4")),
    ("mkv", ("video", "matroska", None)),
    ("webm", ("video", None, None)),
    ("avi", ("video", None, None)),
    ("mov", ("video", None, "quicktime")),
    ("qt", ("video", None, "quicktime")),
    ("wmv", ("video", "windows", None)),
    ("flv", ("video", "flash", None)),
    ("mpg", ("video", None, "mpeg")),
    ("mpeg", ("video", None, None)),
    ("3gp", ("video", "mobile", None)),
    # Audio
    ("mp3", ("audio", None, None)),
    ("wav", ("audio", "lossless", None)),
    ("flac", ("audio", "lossless", None)),
    ("aiff", ("audio", "lossless", None)),
    ("ogg", ("audio", None, "vorbis")),
    ("opus", ("audio", None, None)),
    ("aac", ("audio", None, None)),
    ("m4a", ("audio", None, "aac")),
    ("wma", ("audio", "windows", None)),
    ("mid", ("audio", None, "midi")),
    ("midi", ("audio", None, None)),
    # Documents
    ("pdf", ("document", None, None)),
    ("txt", ("document", "text", None)),
    ("md", ("document", "text", "markdown")),
    ("rst", ("document", "text", None)),
    ("rtf", ("document", "text", None)),
    ("doc", ("document", "word", None)),
    ("docx", ("document", "word", "doc")),
    ("odt", ("document", "word", None)),
    ("xls", ("document", "spreadsheet", None)),
    ("xlsx", ("document", "spreadsheet", "xls")),
    ("ods", ("document", "spreadsheet", None)),
    ("csv", ("document", "spreadsheet", None)),
    ("ppt", ("document", "presentation", None)),
    ("pptx", ("document", "presentation", "ppt")),
    ("odp", ("document", "presentation", None)),
    ("epub", ("document", "ebook", None)),
    ("mobi", ("document", "ebook", None)),
    # Archives
    ("zip", ("archive", None, None)),
    ("tar", ("archive", None, None)),
    ("gz", ("archive", "compressed", "gzip")),
    ("tgz", ("archive", "compressed", "gzip")),
    ("bz2", ("archive", "compressed", "bzip2")),
    ("xz", ("archive", "compressed", None)),
    ("zst", ("archive", "compressed", "zstd")),
    ("7z", ("archive", None, None)),
    ("rar", ("archive", None, None)),
    ("iso", ("archive", "disk", None)),
    ("dmg", ("archive", "disk", None)),
    # Code
    ("py", ("code", None, "python")),
    ("ipynb", ("code", "notebook", "python")),
    ("rs", ("code", None, "rust")),
    ("go", ("code", None, None)),
    ("c", ("code", None, None)),
    ("h", ("code", "header", "c")),
    ("cpp", ("code", None, None)),
    ("hpp", ("code", "header", "cpp")),
    ("java", ("code", None, None)),
    ("kt", ("code", None, "kotlin")),
    ("js", ("code", "web", "javascript")),
    ("ts", ("code", "web", "typescript")),
    ("html", ("code", "web", None)),
    ("css", ("code", "web", None)),
    ("rb", ("code", None, "ruby")),
    ("php", ("code", "web", None)),
    ("sh", ("code", "script", "shell")),
    ("ps1", ("code", "script", "powershell")),
    ("sql", ("code", None, None)),
    ("json", ("code", "data", None)),
    ("yaml", ("code", "data", None)),
    ("yml", ("code", "data", "yaml")),
    ("toml", ("code", "data", None)),
    ("xml", ("code", "data", None)),
)


def _normalize_key(extension: str) -> str:
    return extension.lower().lstrip(".")


def _record_from_mapping(extension: str, data: Mapping[str, Any]) -> ExtensionRecord:
    """Build a record from a configuration mapping."""
    if not isinstance(data, Mapping):
        raise ValueError(
            f"Extension '{extension}' must map to a mapping with a 'category' key, got {data!r}"
        )

    category = data.get("category")
    if not category:
        raise ValueError(f"Extension '{extension}' has no category")

    return ExtensionRecord(
        category=str(category),
        alternate_name=data.get("alternate_name") or None,
        sort_directory=data.get("sort_directory") or None,
    )


def build_extension_table(
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None
) -> Mapping[str, ExtensionRecord]:
    """
    Build the read-only extension table.

    Args:
        overrides: Optional mapping of extension to a mapping with
            ``category``, ``alternate_name`` and ``sort_directory`` keys.
            Entries replace or extend the built-in table.

    Returns:
        Read-only mapping of lower-case extension to ExtensionRecord

    Raises:
        ValueError: If overrides or an override is not a mapping, or an
            override has no category
    """
    table: Dict[str, ExtensionRecord] = {
        ext: ExtensionRecord(*fields) for ext, fields in _BUILTIN_EXTENSIONS
    }

    overrides = overrides or {}
    if not isinstance(overrides, Mapping):
        raise ValueError(f"Extension overrides must be a mapping, got {overrides!r}")

    for ext, data in overrides.items():
        key = _normalize_key(str(ext))
        table[key] = _record_from_mapping(key, data)

    return MappingProxyType(table)


EXTENSIONS = build_extension_table()


def lookup(
    extension: str, table: Mapping[str, ExtensionRecord] = EXTENSIONS
) -> Optional[ExtensionRecord]:
    """Return the record for an already-normalized extension, if any."""
    return table.get(extension)
