from src.dojo_attendance.dojo_attendance.common.ids import IdGenerator
from src.dojo_attendance.dojo_attendance.database.bootstrap import create_store
from src.dojo_attendance.dojo_attendance.database.memory_base import InMemoryTable


def test_mutations_do_not_touch_snapshots_already_handed_out():
    table = InMemoryTable(["a", "b", "c"])
    snapshot = table.rows()

    table.append("d")
    table.replace_first(lambda r: r == "b", "B")
    table.remove_where(lambda r: r == "a")

    assert snapshot == ("a", "b", "c")
    assert table.rows() == ("B", "c", "d")


def test_replace_keeps_position_and_delete_keeps_order():
    table = InMemoryTable([1, 2, 3, 4])

    assert table.replace_first(lambda r: r == 2, 20) is True
    assert table.remove_where(lambda r: r == 3) is True

    assert table.rows() == (1, 20, 4)


def test_missing_rows_report_false_and_leave_table_alone():
    table = InMemoryTable([1, 2])

    assert table.replace_first(lambda r: r == 9, 90) is False
    assert table.remove_where(lambda r: r == 9) is False
    assert table.rows() == (1, 2)


def test_upsert_inserts_once_then_replaces():
    table = InMemoryTable([("k1", 1)])

    assert table.upsert(lambda r: r[0] == "k2", ("k2", 2)) is True
    assert table.upsert(lambda r: r[0] == "k2", ("k2", 3)) is False

    assert table.rows() == (("k1", 1), ("k2", 3))


def test_id_generator_never_repeats_within_a_burst():
    ids = IdGenerator()
    generated = [ids.next_id("stu") for _ in range(1000)]

    assert len(set(generated)) == 1000
    assert all(i.startswith("stu-") for i in generated)


def test_store_always_has_admin_and_seed_is_optional():
    bare = create_store(seed_demo_data=False)
    seeded = create_store(seed_demo_data=True)

    assert [u.id for u in bare.users] == ["admin-1"]
    assert len(bare.students) == 0 and len(bare.classes) == 0
    assert len(seeded.users) == 3
    assert len(seeded.students) == 5
    assert len(seeded.classes) == 5
    assert len(seeded.attendance) == 0
