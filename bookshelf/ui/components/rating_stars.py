import flet as ft
from bookshelf.config import COLOR_STAR, COLOR_TEXT_MUTED, MAX_RATING
from bookshelf.services.dialog_service import star_states


class RatingStars(ft.Row):
    def __init__(self, rating: int, on_select):
        super().__init__()
        self.rating = rating
        self.on_select = on_select
        self.spacing = 0
        self.controls = self._build_stars()

    def _build_stars(self):
        return [
            ft.IconButton(
                icon=ft.Icons.STAR if active else ft.Icons.STAR_BORDER,
                icon_color=COLOR_STAR if active else COLOR_TEXT_MUTED,
                tooltip=f"{i + 1} / {MAX_RATING}",
                on_click=lambda _e, value=i + 1: self._on_star_click(value),
            )
            for i, active in enumerate(star_states(self.rating))
        ]

    def _on_star_click(self, value: int):
        self.on_select(value)
        self.rating = value
        self.controls = self._build_stars()
        self.update()
