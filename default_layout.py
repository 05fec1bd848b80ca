import pandas as pd


class DefaultLayoutInitializer:
    WORKSPACE = [
        ("Mail", 0, 0, 0),
        ("Calendar", 0, 1, 0),
        ("Photos", 0, 2, 0),
        ("Notes", 0, 3, 0),
        ("Maps", 0, 0, 1),
        ("Tools", 0, 2, 2),
        ("Music", 0, 1, 3),
        ("Weather", 1, 0, 0),
        ("Clock", 1, 1, 1),
        ("News", 1, 3, 1),
        ("Books", 1, 2, 3),
    ]
    DOCK = [("Phone", 0), ("Messages", 1), ("Browser", 3), ("Camera", 4)]
    FOLDER = ["Calculator", "Files", "Recorder", "Terminal"]
    ALL_APPS = [
        "Books", "Browser", "Calculator", "Calendar", "Camera", "Clock",
        "Contacts", "Files", "Gallery", "Mail", "Maps", "Messages", "Music",
        "News", "Notes", "Phone", "Photos", "Podcasts", "Recorder", "Settings",
        "Store", "Terminal", "Translate", "Weather", "Wallet",
    ]

    def create(self) -> pd.DataFrame:
        rows = []
        for title, page, x, y in self.WORKSPACE:
            rows.append({"title": title, "container": "workspace", "page": page, "cell_x": x, "cell_y": y})
        for title, rank in self.DOCK:
            rows.append({"title": title, "container": "dock", "page": 0, "cell_x": rank, "cell_y": 0})
        for title in self.FOLDER:
            rows.append({"title": title, "container": "folder:Tools", "page": 0, "cell_x": 0, "cell_y": 0})
        for title in self.ALL_APPS:
            rows.append({"title": title, "container": "all_apps", "page": 0, "cell_x": 0, "cell_y": 0})
        return pd.DataFrame(rows, columns=["title", "container", "page", "cell_x", "cell_y"])
