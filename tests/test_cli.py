import io
import json
from pathlib import Path

from cargo_pack.cli import PackArgs, main, run
from cargo_pack.config import CARGO_PACK_CONFIG
from cargo_pack.testing import write_manifest, write_package


def _run(args: PackArgs) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    code = run(args, out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def _workspace(root: Path) -> None:
    write_manifest(root, '[workspace]\nmembers = ["app"]\n')
    write_package(
        root / "app",
        "app",
        """
        [package.metadata.pack]
        files = ["README.md", "LICENSE"]

        [package.metadata.pack.docker]
        base-image = "alpine:3"
        """,
    )


def test_prints_files_one_per_line(tmp_path: Path) -> None:
    _workspace(tmp_path)

    code, out, err = _run(PackArgs(package="app", cwd=str(tmp_path)))

    assert code == 0
    assert out.splitlines() == ["README.md", "LICENSE"]
    assert err == ""


def test_prints_metadata_path_as_json(tmp_path: Path) -> None:
    _workspace(tmp_path)

    code, out, _ = _run(
        PackArgs(package="app", path="package.metadata.pack.docker", cwd=str(tmp_path))
    )

    assert code == 0
    assert json.loads(out) == {"base-image": "alpine:3"}


def test_reports_errors_on_stderr(tmp_path: Path) -> None:
    _workspace(tmp_path)

    code, out, err = _run(PackArgs(package="missing", cwd=str(tmp_path)))

    assert code == 1
    assert out == ""
    assert err.strip() == "error: unknown package missing"


def test_missing_path_is_an_error(tmp_path: Path) -> None:
    _workspace(tmp_path)

    code, _, err = _run(
        PackArgs(package="app", path="package.metadata.deb", cwd=str(tmp_path))
    )

    assert code == 1
    assert "no package.metadata.deb found" in err


def test_main_parses_arguments(tmp_path: Path, capsys) -> None:
    _workspace(tmp_path)

    code = main(["package=app", f"cwd={tmp_path}"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["README.md", "LICENSE"]


def test_uses_process_config_without_cwd(cargo_pack_tmp_root: Path) -> None:
    _workspace(cargo_pack_tmp_root)

    code, out, err = _run(PackArgs(package="app"))

    assert code == 0
    assert out.splitlines() == ["README.md", "LICENSE"]
    assert err == ""


def test_cwd_argument_leaves_process_config_alone(
    cargo_pack_tmp_root: Path, tmp_path: Path
) -> None:
    other = tmp_path / "other"
    _workspace(other)

    code, out, _ = _run(PackArgs(package="app", cwd=str(other)))

    assert code == 0
    assert out.splitlines() == ["README.md", "LICENSE"]
    assert CARGO_PACK_CONFIG.cwd_override == cargo_pack_tmp_root
