import numpy as np
from PIL import Image

from pathtracer.main import get_options, main

FAST = ["--scene", "basic", "--width", "16", "--samples", "1", "--max-depth", "2",
        "--workers", "1", "--seed", "11", "--no-progress", "--log-level", "WARNING"]


def test_renders_png(tmp_path):
    out = tmp_path / "basic.png"
    assert main(FAST + ["-o", str(out)]) == 0
    with Image.open(out) as img:
        assert img.size == (16, 9)


def test_writes_ppm_to_stdout(capsys):
    assert main(FAST) == 0
    text = capsys.readouterr().out
    lines = text.splitlines()
    assert lines[:3] == ["P3", "16 9", "255"]
    assert len(lines) == 3 + 16 * 9


def test_seeded_runs_match(tmp_path):
    a, b = tmp_path / "a.png", tmp_path / "b.png"
    main(FAST + ["-o", str(a)])
    main(FAST + ["-o", str(b)])
    with Image.open(a) as img_a, Image.open(b) as img_b:
        np.testing.assert_array_equal(np.asarray(img_a), np.asarray(img_b))


def test_invalid_samples_exit_code(tmp_path):
    args = FAST.copy()
    args[args.index("--samples") + 1] = "0"
    assert main(args + ["-o", str(tmp_path / "x.png")]) == 2
    assert not (tmp_path / "x.png").exists()


def test_invalid_workers_exit_code():
    args = FAST.copy()
    args[args.index("--workers") + 1] = "0"
    assert main(args) == 2


def test_config_file(tmp_path):
    config = tmp_path / "render.conf"
    config.write_text("scene = cover\nwidth = 12\nsamples = 3\n")
    options = get_options(["--config", str(config)])
    assert (options.scene, options.width, options.samples) == ("cover", 12, 3)
    assert options.output is None
