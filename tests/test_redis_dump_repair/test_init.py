"""Test module for redis_dump_repair package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import redis_dump_repair

    # Assert
    assert redis_dump_repair is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import redis_dump_repair

    # Assert
    assert redis_dump_repair.__version__ == "0.1.0"


def test_package_exports() -> None:
    """Test that __all__ names resolve."""
    # Arrange & Act
    import redis_dump_repair

    # Assert
    for name in redis_dump_repair.__all__:
        assert hasattr(redis_dump_repair, name)
