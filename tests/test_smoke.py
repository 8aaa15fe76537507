"""Package import smoke test."""


def test_import_scoresync():
    import scoresync

    assert scoresync.__version__
    assert scoresync.ScoreboardState is not None


def test_subpackages_importable():
    import scoresync.parsing.framing
    import scoresync.parsing.layouts
    import scoresync.publishing
    import scoresync.sync_app
    import scoresync.transports

    assert scoresync.parsing.layouts.build_pattern_table is not None
