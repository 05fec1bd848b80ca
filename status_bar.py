import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, view, page_index, page_count,
                   focused_title, last_cue, vertical_bar
    """
    text = ""
    now = time.time()
    if context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        view = context.get('view', 'workspace')
        mode = {
            'workspace': 'HOME',
            'all_apps': 'ALL APPS',
            'folder': 'FOLDER',
        }.get(view, view.upper())
        page_count = context.get('page_count', 1)
        page_index = context.get('page_index', 0)
        focused = context.get('focused_title') or '-'
        cue = context.get('last_cue')
        cue_text = f" | cue {cue.value}" if cue is not None else ""
        bar = " | side dock" if context.get('vertical_bar') else ""
        text = f" {mode} | Page {page_index + 1}/{page_count} | {focused}{cue_text}{bar}"

    return text.ljust(width)[:width]
