"""Fixed hosts, paths and titles for generated passage links."""

DEFAULT_TRANSLATION = "ESV"

SHORT_LINK_HOST = "ref.ly"
BRIDGE_PATH = "logosres"
CATALOG_HOST = "biblia.com"

APP_BRIDGE_TITLE = "Open in Logos"
CATALOG_TITLE = "Biblia"

# URL and markup templates rendered with render_template
SHORT_LINK_TEMPLATE = "https://{{ host }}/{{ ref }};{{ translation }}"
APP_BRIDGE_TEMPLATE = "https://{{ host }}/{{ path }}/{{ translation_lower }}?ref=Bible{{ translation_upper }}.{{ ref }}"
CATALOG_TEMPLATE = "https://{{ host }}/bible/{{ translation }}/{{ path }}"
MARKDOWN_LINK_TEMPLATE = "[{{ title }}]({{ url }})"

NO_REFERENCE_NOTICE = "Select a Bible reference (or copy one to clipboard) and run the command again."
