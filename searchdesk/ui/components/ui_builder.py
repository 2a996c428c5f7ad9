from PySide6.QtCore import Qt
from PySide6.QtGui import QDoubleValidator, QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QStatusBar,
    QTableWidget,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from ...constants import FILE_TYPE_CHOICES
from .result_renderer import COLUMNS, COLUMN_RATIOS


def _add_action(menu, text, slot, shortcut=None):
    action = menu.addAction(text)
    action.triggered.connect(lambda _=False: slot())
    if shortcut:
        action.setShortcut(QKeySequence(shortcut))
    return action


def build_menubar(main):
    menubar = main.menuBar()

    search_menu = menubar.addMenu("搜索(&S)")
    _add_action(search_menu, "🔍 快速搜索", main.start_basic_search, "Ctrl+Return")
    _add_action(search_menu, "🧭 高级搜索", main.start_advanced_search)
    search_menu.addSeparator()
    _add_action(search_menu, "🚪 退出", main.close, "Alt+F4")

    tool_menu = menubar.addMenu("工具(&T)")
    _add_action(tool_menu, "🔄 后台扫描", main.trigger_scan)
    _add_action(tool_menu, "🔧 索引设置", main.show_index_settings)

    theme_menu = menubar.addMenu("主题(&V)")
    _add_action(theme_menu, "☀️ 浅色", lambda: main.on_theme_change("light"))
    _add_action(theme_menu, "🌙 深色", lambda: main.on_theme_change("dark"))


def _build_tips(title, lines):
    box = QFrame()
    layout = QVBoxLayout(box)
    layout.setContentsMargins(4, 4, 4, 4)
    head = QLabel(title)
    head.setFont(QFont("微软雅黑", 9, QFont.Bold))
    layout.addWidget(head)
    for line in lines:
        lbl = QLabel(f"• {line}")
        lbl.setStyleSheet("color: #666;")
        layout.addWidget(lbl)
    return box


def build_basic_tab(main):
    tab = QWidget()
    layout = QVBoxLayout(tab)

    row = QHBoxLayout()
    main.entry_kw = QLineEdit()
    main.entry_kw.setPlaceholderText("输入文件名或路径关键字...")
    main.entry_kw.setFont(QFont("微软雅黑", 11))
    main.entry_kw.setClearButtonEnabled(True)
    main.entry_kw.returnPressed.connect(main.start_basic_search)
    row.addWidget(main.entry_kw, 1)

    main.btn_search = QPushButton("🔍 搜索")
    main.btn_search.clicked.connect(main.start_basic_search)
    row.addWidget(main.btn_search)
    layout.addLayout(row)

    layout.addWidget(_build_tips("搜索提示", ["支持文件名搜索", "支持路径关键字搜索"]))
    layout.addStretch()
    return tab


def build_advanced_tab(main):
    tab = QWidget()
    layout = QVBoxLayout(tab)
    form = QFormLayout()

    main.combo_type = QComboBox()
    main.combo_type.setEditable(True)
    for value, label in FILE_TYPE_CHOICES:
        main.combo_type.addItem(label, value)
    main.combo_type.setToolTip("选择文件类型，或直接输入扩展名（如 pdf）")
    form.addRow("文件类型", main.combo_type)

    size_row = QHBoxLayout()
    validator = QDoubleValidator(0.0, 1e9, 3)
    validator.setNotation(QDoubleValidator.StandardNotation)
    main.entry_min_size = QLineEdit()
    main.entry_min_size.setPlaceholderText("最小")
    main.entry_min_size.setValidator(validator)
    main.entry_max_size = QLineEdit()
    main.entry_max_size.setPlaceholderText("最大")
    main.entry_max_size.setValidator(validator)
    size_row.addWidget(main.entry_min_size)
    size_row.addWidget(QLabel("-"))
    size_row.addWidget(main.entry_max_size)
    form.addRow("文件大小范围 (MB)", size_row)

    main.entry_adv_query = QLineEdit()
    main.entry_adv_query.setPlaceholderText("输入要搜索的内容")
    main.entry_adv_query.returnPressed.connect(main.start_advanced_search)
    form.addRow("搜索内容", main.entry_adv_query)
    layout.addLayout(form)

    btn_row = QHBoxLayout()
    btn_row.addStretch()
    main.btn_adv_search = QPushButton("🔍 开始搜索")
    main.btn_adv_search.clicked.connect(main.start_advanced_search)
    btn_row.addWidget(main.btn_adv_search)
    layout.addLayout(btn_row)

    layout.addWidget(
        _build_tips(
            "高级搜索提示",
            ["可以指定搜索特定类型的文件", "大小范围可只填一端", "任意一个条件即可开始搜索"],
        )
    )
    layout.addStretch()
    return tab


def build_results_area(main):
    area = QWidget()
    layout = QVBoxLayout(area)
    layout.setContentsMargins(0, 0, 0, 0)

    main.lbl_loading = QLabel("⏳ 正在搜索...")
    main.lbl_loading.setVisible(False)
    layout.addWidget(main.lbl_loading)

    main.table = QTableWidget(0, len(COLUMNS))
    main.table.setHorizontalHeaderLabels([title for _, title in COLUMNS])
    main.table.setSelectionBehavior(QAbstractItemView.SelectRows)
    main.table.setSelectionMode(QAbstractItemView.SingleSelection)
    main.table.setAlternatingRowColors(True)
    main.table.verticalHeader().setVisible(False)
    main.table.setWordWrap(False)
    main.table.setTextElideMode(Qt.ElideMiddle)
    header = main.table.horizontalHeader()
    header.setSectionResizeMode(QHeaderView.Interactive)
    header.setStretchLastSection(True)
    main.table.cellDoubleClicked.connect(main.handlers.on_double_click)
    layout.addWidget(main.table, 1)

    main.lbl_empty = QLabel()
    main.lbl_empty.setAlignment(Qt.AlignCenter)
    main.lbl_empty.setStyleSheet("color: #999;")
    layout.addWidget(main.lbl_empty)

    main.page_bar = QWidget()
    pager = QHBoxLayout(main.page_bar)
    pager.setContentsMargins(0, 0, 0, 0)
    pager.addStretch()
    main.btn_first = QPushButton("⏮")
    main.btn_prev = QPushButton("◀")
    main.lbl_page = QLabel()
    main.btn_next = QPushButton("▶")
    main.btn_last = QPushButton("⏭")
    for btn, action in (
        (main.btn_first, "first"),
        (main.btn_prev, "prev"),
        (main.btn_next, "next"),
        (main.btn_last, "last"),
    ):
        btn.setFixedWidth(36)
        btn.clicked.connect(lambda _=False, a=action: main.renderer.go_page(a))
    pager.addWidget(main.btn_first)
    pager.addWidget(main.btn_prev)
    pager.addWidget(main.lbl_page)
    pager.addWidget(main.btn_next)
    pager.addWidget(main.btn_last)
    main.page_bar.setVisible(False)
    layout.addWidget(main.page_bar)
    return area


def build_ui(main):
    central = QWidget()
    main.setCentralWidget(central)
    layout = QVBoxLayout(central)
    layout.setContentsMargins(10, 10, 10, 6)

    main.tabs = QTabWidget()
    main.tabs.addTab(build_basic_tab(main), "🔍 快速搜索")
    main.tabs.addTab(build_advanced_tab(main), "🧭 高级搜索")
    main.tabs.setMaximumHeight(220)
    layout.addWidget(main.tabs)

    layout.addWidget(build_results_area(main), 1)

    main.status_bar = QStatusBar()
    main.setStatusBar(main.status_bar)


def apply_column_ratios(main):
    width = main.table.viewport().width()
    if width <= 0:
        return
    for col, ratio in enumerate(COLUMN_RATIOS[:-1]):
        main.table.setColumnWidth(col, int(width * ratio))


def bind_shortcuts(main):
    def focus_basic():
        main.tabs.setCurrentIndex(0)
        main.entry_kw.setFocus()

    bindings = [
        ("Ctrl+F", focus_basic),
        ("Ctrl+Shift+F", lambda: main.tabs.setCurrentIndex(1)),
        ("PgDown", lambda: main.renderer.go_page("next")),
        ("PgUp", lambda: main.renderer.go_page("prev")),
    ]
    for key, slot in bindings:
        shortcut = QShortcut(QKeySequence(key), main)
        shortcut.activated.connect(slot)
