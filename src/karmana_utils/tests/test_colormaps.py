import matplotlib
import numpy as np
import pytest
from matplotlib.colors import ListedColormap

from karmana_utils.colormaps import cmap_to_csv, csv_to_cmap
from karmana_utils.errors import ColormapFormatError


def test_csv_header(tmp_path):
    p = tmp_path / 'cmap.csv'
    cmap_to_csv(p, ListedColormap(['red', 'blue']))
    lines = p.read_text().splitlines()
    assert lines[0] == 'Value,Red,Green,Blue,Alpha'
    assert len(lines) == 3


def test_listed_colormap_endpoints(tmp_path):
    p = tmp_path / 'cmap.csv'
    cmap_to_csv(p, ListedColormap(['red', 'green', 'blue']))
    restored = csv_to_cmap(p, name='rgb')
    assert restored.name == 'rgb'
    assert np.allclose(restored(0.0), (1.0, 0.0, 0.0, 1.0))
    assert np.allclose(restored(1.0), (0.0, 0.0, 1.0, 1.0))
    assert np.allclose(restored(0.5), (0.0, 0.5, 0.0, 1.0), atol=0.02)


def test_viridis_restored(tmp_path):
    p = tmp_path / 'viridis.csv'
    viridis = matplotlib.colormaps['viridis']
    cmap_to_csv(p, viridis)
    restored = csv_to_cmap(p)
    x = np.linspace(0.0, 1.0, 256)
    assert np.allclose(restored(x), viridis(x), atol=1e-6)


def test_alpha_restored(tmp_path):
    p = tmp_path / 'alpha.csv'
    cmap_to_csv(p, ListedColormap([(1.0, 0.0, 0.0, 0.5), (0.0, 0.0, 1.0, 1.0)]))
    restored = csv_to_cmap(p)
    assert restored(0.0)[3] == pytest.approx(0.5)
    assert restored(1.0)[3] == pytest.approx(1.0)


def test_custom_values_are_rescaled(tmp_path):
    p = tmp_path / 'scaled.csv'
    p.write_text(
        'Value,Red,Green,Blue,Alpha\n'
        '10,1,0,0,1\n'
        '20,0,0,1,1\n'
    )
    restored = csv_to_cmap(p)
    assert np.allclose(restored(0.0), (1.0, 0.0, 0.0, 1.0))
    assert np.allclose(restored(1.0), (0.0, 0.0, 1.0, 1.0))


def test_missing_columns(tmp_path):
    p = tmp_path / 'bad.csv'
    p.write_text('Value,Red\n0,1\n')
    with pytest.raises(ColormapFormatError):
        csv_to_cmap(p)
