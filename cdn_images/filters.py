def build_image_link(base_url, path, alt='Image'):
    """Markdown image tag for ``path`` under ``base_url``.

    Nothing is escaped or encoded; a bad path gives a broken link.
    """
    return f"![{alt}]({base_url}{path})"


def image_filter(base_url):
    def image_from_cdn(path, alt='Image'):
        return build_image_link(base_url, path, alt)

    return image_from_cdn
