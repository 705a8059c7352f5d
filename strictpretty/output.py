from io import StringIO


def render_to_stream(stream, fragments):
    for fragment in fragments:
        stream.write(fragment)


def render_to_str(fragments):
    stream = StringIO()
    render_to_stream(stream, fragments)
    return stream.getvalue()
