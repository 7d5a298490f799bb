import os

from cdn_images import jinja_filters

AUTHOR = 'Hari Gopal'
SITENAME = "Hari's Blog"
SITEURL = ""

PATH = "content"

TIMEZONE = 'Asia/Kolkata'
DEFAULT_LANG = 'en'
COPYRIGHT_YEAR = '2026'

THEME = 'terminimal'

FEED_DOMAIN = "https://harigopal.in"
FEED_ALL_ATOM = "feeds/all.atom.xml"
CATEGORY_FEED_ATOM = "feeds/{slug}.atom.xml"
TAG_FEED_ATOM = None
FEED_ALL_RSS = None
CATEGORY_FEED_RSS = None
RSS_FEED_SUMMARY_ONLY = False

STATIC_PATHS = ["static"]

MENUITEMS = (
    ("Home", "$BASE_URL/index.html"),
    ("About", "$BASE_URL/pages/about.html"),
    ("GitHub", "https://github.com/harigopal"),
)

DEFAULT_PAGINATION = 5

JINJA_ENVIRONMENT = {
    'extensions': ['jinja2.ext.loopcontrols']
}

# Images in posts are served from Cloudinary, not STATIC_PATHS.
CDN_BASE_URL = os.environ.get(
    "CDN_BASE_URL",
    "https://res.cloudinary.com/harigopal/image/upload/v1541686088/blog/",
)

JINJA_FILTERS = jinja_filters(CDN_BASE_URL)

ACCENT_COLOR = 'blue'
BACKGROUND_COLOR = 'dark'

PLUGINS = [
    "pelican.plugins.neighbors",
    "pelican.plugins.minify",
    "pelican.plugins.jinja2content",
]

CSS_MIN = True
JS_MIN = True

RELATIVE_URLS = True

LOG_FILTER = []
