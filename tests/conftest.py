from cargo_pack.testing import cargo_pack_tmp_root  # noqa: F401
