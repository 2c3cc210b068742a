import pytest

pytest.importorskip("PySide6.QtWidgets")

from studentrecords.controller.ports import Connectable, RecordRow
from studentrecords.controller.record_controller import RecordController
from studentrecords.model.store import RecordStore
from studentrecords.view.main_window import MainWindow

ROWS = [
    RecordRow(id=1, name="Alice Johnson", email="alice@university.com", gpa_text="3.80"),
    RecordRow(id=2, name="Bob Smith", email="bob@university.com", gpa_text="3.50"),
]


@pytest.fixture
def window(qapp):
    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()


def test_render_fills_table(window: MainWindow):
    window.render(ROWS, total=5)

    assert window.table.rowCount() == 2
    assert window.table.item(1, 0).text() == "2"
    assert window.table.item(1, 1).text() == "Bob Smith"
    assert window.table.item(0, 3).text() == "3.80"
    assert window.lbl_total.text() == "Total students: 5"


def test_populate_and_clear_form(window: MainWindow):
    window.search_panel.edit_search.setText("bob")
    window.populate_form("Bob Smith", "bob@university.com", "3.50")
    assert window.form_panel.values() == ("Bob Smith", "bob@university.com", "3.50")

    window.clear_form()
    assert window.form_panel.values() == ("", "", "")
    assert window.search_panel.edit_search.text() == ""


def test_set_status(window: MainWindow):
    window.set_status("Selected: Bob Smith (ID: 2)")
    assert window.statusBar().currentMessage() == "Selected: Bob Smith (ID: 2)"


def test_buttons_emit_raw_form_text(window: MainWindow):
    received = []
    window.add_requested.connect(lambda *args: received.append(("add", args)))
    window.update_requested.connect(lambda *args: received.append(("update", args)))
    window.delete_requested.connect(lambda: received.append(("delete", ())))
    window.clear_requested.connect(lambda: received.append(("clear", ())))
    window.search_requested.connect(lambda text: received.append(("search", (text,))))

    window.form_panel.set_values(" Dana ", "dana@u.edu", "abc")
    window.search_panel.edit_search.setText("ali")

    window.form_panel.btn_add.click()
    window.form_panel.btn_update.click()
    window.form_panel.btn_delete.click()
    window.form_panel.btn_clear.click()
    window.search_panel.btn_search.click()

    assert received == [
        ("add", (" Dana ", "dana@u.edu", "abc")),
        ("update", (" Dana ", "dana@u.edu", "abc")),
        ("delete", ()),
        ("clear", ()),
        ("search", ("ali",)),
    ]


def test_row_selection_emits_index(window: MainWindow):
    window.render(ROWS, total=2)
    indices = []
    window.selection_changed.connect(indices.append)

    window.table.selectRow(1)

    assert indices == [1]


def test_render_does_not_emit_selection(window: MainWindow):
    window.render(ROWS, total=2)
    window.table.selectRow(0)
    indices = []
    window.selection_changed.connect(indices.append)

    window.render(ROWS[:1], total=1)

    assert indices == []


def test_controller_drives_window(window: MainWindow):
    store = RecordStore(seed=[("Alice Johnson", "alice@university.com", 3.8)])
    controller = RecordController(store, window)

    window.form_panel.set_values("Dana", "dana@u.edu", "3.4")
    window.form_panel.btn_add.click()

    assert window.table.rowCount() == 2
    assert window.table.item(1, 1).text() == "Dana"
    assert window.statusBar().currentMessage() == "Added: Dana (ID: 2)"
    assert window.form_panel.values() == ("", "", "")

    window.table.selectRow(0)
    assert controller.session.selected_id == 1
    assert window.form_panel.values() == ("Alice Johnson", "alice@university.com", "3.80")


def test_window_signals_are_connectable(window: MainWindow):
    for signal in (window.add_requested, window.update_requested, window.delete_requested,
                   window.search_requested, window.clear_requested, window.selection_changed):
        assert isinstance(signal, Connectable)
