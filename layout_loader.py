import logging
import os
import sys

import pandas as pd

from default_layout import DefaultLayoutInitializer
from pagination import Paginator
from workspace_model import (
    CellContainer,
    Dock,
    FocusTracker,
    Folder,
    Item,
    LauncherModel,
    TextField,
    paginate,
)

logger = logging.getLogger(__name__)

COLUMNS = ["title", "container", "page", "cell_x", "cell_y"]
FOLDER_PREFIX = "folder:"


class LayoutFileHandler:
    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in {".csv", ".parquet", ".xlsx"}:
            print("Unsupported layout file type (use .csv, .parquet, or .xlsx)")
            sys.exit(1)

    def load_or_create(self) -> pd.DataFrame:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return self._default_df()

        if self.ext == ".csv":
            try:
                df = pd.read_csv(self.path)
            except pd.errors.EmptyDataError:
                return self._default_df()
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            df = pd.read_parquet(self.path)
        else:
            self._ensure_excel_engine()
            df = pd.read_excel(self.path, sheet_name=0)
        return self._ensure_non_empty(normalize_layout(df))

    def save(self, df: pd.DataFrame) -> None:
        if self.ext == ".csv":
            df.to_csv(self.path, index=False)
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            df.to_parquet(self.path)
        else:
            self._ensure_excel_engine()
            df.to_excel(self.path, index=False)

    def _ensure_non_empty(self, df: pd.DataFrame) -> pd.DataFrame:
        if df is None or df.empty:
            return self._default_df()
        return df

    def _default_df(self) -> pd.DataFrame:
        return DefaultLayoutInitializer().create()

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        print("Parquet support requires pyarrow. Install via: pip install pyarrow")
        sys.exit(1)

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        print("XLSX support requires openpyxl. Install via: pip install openpyxl")
        sys.exit(1)


def normalize_layout(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce a raw layout table to the known columns, dropping unusable rows."""
    if df is None:
        return pd.DataFrame(columns=COLUMNS)
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    for col in COLUMNS:
        if col not in df.columns:
            df[col] = 0 if col in ("page", "cell_x", "cell_y") else pd.NA
    df = df[COLUMNS].copy()

    df["title"] = df["title"].astype("string").str.strip().fillna("")
    df["container"] = df["container"].astype("string").str.strip().str.lower().fillna("")
    for col in ("page", "cell_x", "cell_y"):
        df[col] = pd.to_numeric(df[col], errors="coerce")

    valid = (
        (df["title"] != "")
        & (df["container"] != "")
        & df[["page", "cell_x", "cell_y"]].notna().all(axis=1)
    ).astype(bool)
    if not valid.all():
        logger.warning("dropping %d layout rows with missing fields", int((~valid).sum()))
    df = df[valid].copy()
    cells = df[["page", "cell_x", "cell_y"]]
    whole = ((cells % 1 == 0) & (cells >= 0)).all(axis=1).astype(bool)
    if not whole.all():
        logger.warning("dropping %d layout rows with non-integer cells", int((~whole).sum()))
    df = df[whole].copy()
    for col in ("page", "cell_x", "cell_y"):
        df[col] = df[col].astype(int)
    return df.reset_index(drop=True)


def _folder_name(container: str) -> str | None:
    if container.startswith(FOLDER_PREFIX):
        name = container[len(FOLDER_PREFIX) :].strip()
        return name or None
    return None


def build_launcher_model(df: pd.DataFrame, cfg: dict, tracker=None) -> LauncherModel:
    tracker = tracker or FocusTracker()
    df = normalize_layout(df)
    ws_x, ws_y = cfg["WORKSPACE_GRID"]
    apps_x, apps_y = cfg["ALL_APPS_GRID"]
    folder_x, folder_y = cfg["FOLDER_GRID"]
    dock_count = cfg["DOCK_COUNT"]
    all_items_rank = cfg["DOCK_ALL_ITEMS_RANK"]

    folders = {}
    folder_rows = df[df["container"].str.startswith(FOLDER_PREFIX)]
    for container, rows in folder_rows.groupby("container", sort=False):
        name = _folder_name(container)
        if name is None:
            continue
        items = [Item(title, kind="app", tracker=tracker) for title in rows["title"]]
        folders[name] = Folder(name, items, folder_x, folder_y, tracker=tracker)

    def make_item(title, x, y):
        folder = folders.get(title)
        return Item(
            title,
            x,
            y,
            kind="folder" if folder is not None else "app",
            folder=folder,
            tracker=tracker,
        )

    ws_rows = df[df["container"] == "workspace"]
    page_total = int(ws_rows["page"].max()) + 1 if len(ws_rows) else 1
    pages = [CellContainer(ws_x, ws_y) for _ in range(page_total)]
    for row in ws_rows.sort_values(["page", "cell_y", "cell_x"]).itertuples(index=False):
        page = pages[row.page]
        if not (row.cell_x < ws_x and row.cell_y < ws_y):
            logger.warning("%s at (%d, %d) is outside the %dx%d workspace", row.title, row.cell_x, row.cell_y, ws_x, ws_y)
            continue
        if page.item_at(row.cell_x, row.cell_y) is not None:
            logger.warning("%s collides with another item on page %d", row.title, row.page)
            continue
        page.add(make_item(row.title, row.cell_x, row.cell_y))

    dock = Dock(dock_count, all_items_rank)
    dock.add(Item("All apps", all_items_rank, 0, kind="all_items", tracker=tracker))
    for row in df[df["container"] == "dock"].sort_values("cell_x").itertuples(index=False):
        if row.cell_x >= dock_count or dock.item_at(row.cell_x, 0) is not None:
            logger.warning("%s cannot sit at dock rank %d", row.title, row.cell_x)
            continue
        dock.add(make_item(row.title, row.cell_x, 0))

    app_rows = df[df["container"] == "all_apps"]
    titles = sorted(app_rows["title"].drop_duplicates(), key=lambda t: t.lower())
    all_apps = Paginator(paginate([Item(t, tracker=tracker) for t in titles], apps_x, apps_y))

    model = LauncherModel(
        Paginator(pages),
        dock,
        all_apps,
        TextField("Search", tracker),
        tracker,
        folders=folders,
    )
    return model


def layout_to_frame(model: LauncherModel) -> pd.DataFrame:
    rows = []
    for page_index, page in enumerate(model.workspace.pages):
        for item in page.children():
            rows.append((item.title, "workspace", page_index, item.cell_x, item.cell_y))
    for item in model.dock.children():
        if item.kind == "all_items":
            continue
        rows.append((item.title, "dock", 0, model.dock.rank_of(item), 0))
    for name, folder in model.folders.items():
        for page in folder.pager.pages:
            for item in page.children():
                rows.append((item.title, f"{FOLDER_PREFIX}{name}", 0, 0, 0))
    for page in model.all_apps.pages:
        for item in page.children():
            rows.append((item.title, "all_apps", 0, 0, 0))
    return pd.DataFrame(rows, columns=COLUMNS)
