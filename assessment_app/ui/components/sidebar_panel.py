"""Component for the category and subcategory navigator."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QLabel,
    QProgressBar,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from assessment_app.constants.ui_constants import (
    COMPLETED_MARKER,
    DEFAULT_ICON_GLYPH,
    ICON_GLYPHS,
    LOCKED_MARKER,
    SIDEBAR_EMPTY,
    SIDEBAR_GREETING,
    SIDEBAR_LOADING,
    SIDEBAR_MIN_WIDTH,
    SIDEBAR_NO_SUBCATEGORIES,
)
from assessment_app.core.assessment_manager import AssessmentManager
from assessment_app.core.models import SubcategoryKey
from assessment_app.styling.color_palette import ColorPalette, Theme
from assessment_app.styling.styles import Styles

_PAIR_ROLE = Qt.UserRole


class SidebarPanel(QWidget):
    """Tree of categories with lock, completion and progress indicators."""

    def __init__(
        self,
        assessment_manager: AssessmentManager,
        on_select_subcategory: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.assessment_manager = assessment_manager
        self.on_select_subcategory = on_select_subcategory
        self._items: dict[SubcategoryKey, QTreeWidgetItem] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.setMinimumWidth(SIDEBAR_MIN_WIDTH)

        self.greeting_label = QLabel(SIDEBAR_GREETING, self)
        self.greeting_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.greeting_label)

        self.status_label = QLabel(SIDEBAR_LOADING, self)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.tree = QTreeWidget(self)
        self.tree.setColumnCount(2)
        self.tree.setHeaderHidden(True)
        self.tree.setStyleSheet(Styles.get_sidebar_style())
        self.tree.itemClicked.connect(self._handle_item_clicked)
        layout.addWidget(self.tree, stretch=1)

    def refresh(self) -> None:
        """Rebuild the tree from the manager's catalogue and progress."""
        manager = self.assessment_manager
        catalogue = manager.get_catalogue()
        error_message = manager.get_error_message()

        self.tree.clear()
        self._items = {}

        if manager.is_loading():
            self._show_status(SIDEBAR_LOADING)
            return
        if error_message:
            self._show_status(error_message)
            return
        if catalogue.is_empty():
            self._show_status(SIDEBAR_EMPTY)
            return
        self.status_label.setVisible(False)

        for category in catalogue:
            glyph = ICON_GLYPHS.get(category.icon.lower(), DEFAULT_ICON_GLYPH)
            category_item = QTreeWidgetItem(self.tree, [f"{glyph}  {category.name}", ""])
            category_item.setToolTip(0, category.icon)
            self._attach_progress_bar(category_item, manager.category_progress(category.name))

            if not category.subcategories:
                placeholder = QTreeWidgetItem(category_item, [SIDEBAR_NO_SUBCATEGORIES, ""])
                placeholder.setFlags(Qt.NoItemFlags)

            for subcategory in category.subcategories:
                key = SubcategoryKey(category.name, subcategory)
                item = QTreeWidgetItem(category_item, [self._label_for(key), ""])
                item.setData(0, _PAIR_ROLE, key)
                if not manager.is_unlocked(*key):
                    item.setForeground(0, QBrush(QColor(ColorPalette.TEXT_SECONDARY.get(Theme.LIGHT))))
                self._items[key] = item

            category_item.setExpanded(True)

        self.tree.resizeColumnToContents(0)
        self.highlight_active()

    def highlight_active(self) -> None:
        active = self.assessment_manager.get_active_pair()
        item = self._items.get(active) if active is not None else None
        if item is None:
            self.tree.clearSelection()
            return
        self.tree.setCurrentItem(item)

    def apply_font_size(self, font_size: int) -> None:
        self.tree.setStyleSheet(Styles.get_sidebar_style() + f"QTreeWidget {{ font-size: {font_size}pt; }}")

    def _label_for(self, key: SubcategoryKey) -> str:
        manager = self.assessment_manager
        if manager.is_complete(*key):
            return f"{COMPLETED_MARKER}  {key.subcategory}"
        if not manager.is_unlocked(*key):
            return f"{LOCKED_MARKER}  {key.subcategory}"
        return f"    {key.subcategory}"

    def _attach_progress_bar(self, item: QTreeWidgetItem, percentage: float) -> None:
        bar = QProgressBar(self.tree)
        bar.setRange(0, 100)
        bar.setValue(int(round(percentage)))
        bar.setFormat("%p%")
        bar.setMaximumWidth(90)
        self.tree.setItemWidget(item, 1, bar)

    def _show_status(self, message: str) -> None:
        self.status_label.setText(message)
        self.status_label.setVisible(True)

    def _handle_item_clicked(self, item: QTreeWidgetItem, _column: int) -> None:
        key = item.data(0, _PAIR_ROLE)
        if key is None:
            return
        # Qt may hand back a plain tuple for Python objects stored in item data
        self.on_select_subcategory(SubcategoryKey(*key))
