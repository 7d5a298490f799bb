# This file is only used if you use `make publish` or
# explicitly specify it as your config file.

import os
import sys

sys.path.append(os.curdir)
from pelicanconf import *

# If your site is available via HTTPS, make sure SITEURL begins with https://
SITEURL = "https://harigopal.in"
RELATIVE_URLS = False

CDN_BASE_URL = os.environ.get("PUBLISH_CDN_BASE_URL", CDN_BASE_URL)
JINJA_FILTERS = jinja_filters(CDN_BASE_URL)

HTML_MIN = True
INLINE_CSS_MIN = True
INLINE_JS_MIN = True
CSS_MIN = True
JS_MIN = True

DELETE_OUTPUT_DIRECTORY = True
