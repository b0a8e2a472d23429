import shutil


def pytest_configure(config):
    config.addinivalue_line('markers', 'ghostscript: test runs the real Ghostscript executable')


def pytest_collection_modifyitems(config, items):
    """Deselect tests marked `ghostscript` when no Ghostscript executable is on PATH.

    The conversion tests shell out to `gs`; everything else in the suite
    mocks the subprocess call and runs regardless.
    """
    from karmana_utils.config import GHOSTSCRIPT

    if any(shutil.which(name) for name in GHOSTSCRIPT['executables']):
        return

    removed = [item for item in items if item.get_closest_marker('ghostscript') is not None]
    if not removed:
        return

    kept = [item for item in items if item.get_closest_marker('ghostscript') is None]
    config.hook.pytest_deselected(items=removed)
    items[:] = kept
    tr = config.pluginmanager.get_plugin('terminalreporter')
    if tr:
        tr.write_sep('-', f'Deselected {len(removed)} Ghostscript tests (gs not on PATH)')
