"""RSS 2.0 rendering with iTunes extensions."""

import logging
from datetime import datetime

from jinja2 import Environment, StrictUndefined, TemplateError

from bookcast.feeds.builder import format_duration
from bookcast.feeds.models import Podcast
from bookcast.utils.datetime import format_rfc1123, now_utc
from bookcast.utils.errors import RenderError

logger = logging.getLogger(__name__)

ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}
# Control characters are not allowed in XML 1.0
_XML_ESCAPES.update(
    {chr(c): "\ufffd" for c in range(0x20) if chr(c) not in _XML_ESCAPES}
)
# Lone surrogates come from undecodable filenames and cannot be encoded
_XML_ESCAPES.update({chr(c): "\ufffd" for c in range(0xD800, 0xE000)})
_XML_TABLE = str.maketrans(_XML_ESCAPES)

# Element order is fixed so output can be compared against golden files.
RSS_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="{{ itunes_namespace }}">
  <channel>
    <title>{{ podcast.title }}</title>
    <description>{{ podcast.description }}</description>
    <language>{{ language }}</language>
    <itunes:type>{{ itunes_type }}</itunes:type>
    {% if podcast.cover_art_url %}
    <itunes:image href="{{ podcast.cover_art_url }}"></itunes:image>
    {% endif %}
    <lastBuildDate>{{ build_date | rfc1123 }}</lastBuildDate>
    {% for episode in podcast.episodes %}
    <item>
      <title>{{ episode.title }}</title>
      <description>{{ episode.description }}</description>
      <pubDate>{{ episode.pub_date | rfc1123 }}</pubDate>
      <itunes:episode>{{ episode.episode_number }}</itunes:episode>
      {% if episode.duration %}
      <itunes:duration>{{ episode.duration | duration }}</itunes:duration>
      {% endif %}
      <enclosure url="{{ episode.url }}" length="{{ episode.file_size }}" type="{{ episode.mime_type }}"></enclosure>
      <guid>{{ episode.url }}</guid>
    </item>
    {% endfor %}
  </channel>
</rss>
"""


def xml_escape(value: object) -> str:
    """Escape a value for XML text or attribute content."""
    return str(value).translate(_XML_TABLE)


class RSSRenderer:
    """Serialize a Podcast into an RSS 2.0 document.

    Every ``{{ }}`` output in the template goes through ``xml_escape``,
    so the five XML-significant characters are escaped in element text
    and attribute values alike.

    Example:
        >>> renderer = RSSRenderer()
        >>> xml = renderer.render(podcast)
    """

    def __init__(self, language: str = "en-us", itunes_type: str = "serial"):
        """Initialize the renderer.

        Args:
            language: Channel language code
            itunes_type: iTunes show type ("serial" or "episodic")
        """
        self.language = language
        self.itunes_type = itunes_type

        self.env = Environment(
            autoescape=False,
            finalize=xml_escape,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["rfc1123"] = format_rfc1123
        self.env.filters["duration"] = format_duration
        self.template = self.env.from_string(RSS_TEMPLATE)

    def render(self, podcast: Podcast, build_date: datetime | None = None) -> str:
        """Render the feed.

        Args:
            podcast: Fully built podcast
            build_date: lastBuildDate value (default: now)

        Returns:
            UTF-8 ready XML document

        Raises:
            RenderError: On an internal serialization fault
        """
        if build_date is None:
            build_date = now_utc()

        try:
            xml = self.template.render(
                podcast=podcast,
                build_date=build_date,
                language=self.language,
                itunes_type=self.itunes_type,
                itunes_namespace=ITUNES_NAMESPACE,
            )
        except (TemplateError, ValueError) as e:
            raise RenderError(f"Failed to render RSS feed: {e}") from e

        logger.debug("Rendered feed with %d item(s)", len(podcast.episodes))
        return xml
