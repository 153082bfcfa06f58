from backend.app.models.user import User


def test_user_model_has_columns():
    column_names = [column.name for column in User.__table__.columns]
    expected = {
        "id",
        "email",
        "name",
        "hashed_password",
        "role",
        "is_active",
        "assigned_zone",
        "assigned_thana",
        "created_at",
        "updated_at",
    }
    assert expected.issubset(set(column_names))


def test_user_model_primary_key():
    pk_columns = [column.name for column in User.__table__.primary_key.columns]
    assert "id" in pk_columns


def test_is_admin_covers_admin_roles():
    assert User(role="super_admin").is_admin
    assert User(role="admin").is_admin
    assert not User(role="agent").is_admin
