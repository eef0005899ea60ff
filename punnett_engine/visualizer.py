"""
visualizer.py - 퍼넷 사각형 / 결합 자손 시각화 엔진
교배 결과를 matplotlib 그림(base64 PNG)으로 렌더링
"""

import io
import base64
import numpy as np
from typing import Optional
from dataclasses import dataclass

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle, Circle, FancyBboxPatch
from .punnett import PunnettSquare, OffspringTable, format_percent, allele_badge_color


# ============================================================
# 설정값
# ============================================================
@dataclass
class FigureConfig:
    # 퍼넷 사각형
    cell_size: float = 1.0
    punnett_fig_size: float = 5.0

    # 자손 카드 그리드
    cards_per_row: int = 3
    card_width: float = 3.2
    card_height: float = 4.2

    # 색상 팔레트
    header_color: str = '#eef2ff'
    header_text_color: str = '#1e40af'
    dominant_cell_color: str = '#bfdbfe'
    recessive_cell_color: str = '#fde68a'
    title_color: str = '#4f46e5'
    skin_color: str = '#fcd5b5'
    body_color: str = '#4f46e5'
    joint_badge_color: str = '#ef4444'

    # 머리카락 / 눈
    brown_eye_color: str = 'brown'
    blue_eye_color: str = 'blue'
    curly_hair_color: str = 'saddlebrown'
    straight_hair_color: str = 'goldenrod'
    curl_count: int = 10

    font_size_cell: int = 12
    font_size_title: int = 13
    dpi: int = 120


# ============================================================
# 시각화 엔진 메인
# ============================================================
class CrossVisualizer:
    def __init__(self, config: Optional[FigureConfig] = None, seed: Optional[int] = None):
        self.config = config or FigureConfig()
        # 곱슬머리 흔들림 전용 난수 (교배 결과에는 영향 없음)
        self.rng = np.random.default_rng(seed)

    # --------------------------------------------------------
    # [1] 퍼넷 사각형
    # --------------------------------------------------------
    def create_punnett_image(self, square: PunnettSquare,
                             save_path: Optional[str] = None) -> str:
        cfg = self.config
        n_rows = len(square.rows)
        n_cols = len(square.header)
        sz = cfg.cell_size

        fig, ax = plt.subplots(figsize=(cfg.punnett_fig_size, cfg.punnett_fig_size))

        # 헤더 (부모 2 대립유전자)
        for j, allele in enumerate(square.header):
            self._draw_header(ax, (j + 1) * sz, n_rows * sz, allele)

        # 행 (부모 1 대립유전자 + 칸)
        for i, row in enumerate(square.rows):
            y = (n_rows - 1 - i) * sz
            if row:
                self._draw_header(ax, 0, y, row[0].row_allele)
            for j, cell in enumerate(row):
                color = cfg.dominant_cell_color if cell.is_dominant else cfg.recessive_cell_color
                ax.add_patch(Rectangle(((j + 1) * sz, y), sz, sz,
                                       facecolor=color, edgecolor='#cccccc', lw=1))
                ax.text((j + 1.5) * sz, y + sz * 0.6, cell.genotype,
                        ha='center', va='center', fontsize=cfg.font_size_cell,
                        fontweight='bold')
                ax.text((j + 1.5) * sz, y + sz * 0.3, cell.phenotype,
                        ha='center', va='center', fontsize=cfg.font_size_cell - 4,
                        color='#555555')

        ax.set_title(square.title, color=cfg.title_color, fontsize=cfg.font_size_title)
        ax.set_xlim(0, (n_cols + 1) * sz)
        ax.set_ylim(0, (n_rows + 1) * sz)
        ax.set_aspect('equal')
        ax.axis('off')

        return self._finish(fig, save_path)

    def _draw_header(self, ax, x, y, allele):
        cfg = self.config
        sz = cfg.cell_size
        ax.add_patch(Rectangle((x, y), sz, sz, facecolor=cfg.header_color,
                               edgecolor='white', lw=1))
        ax.text(x + sz / 2, y + sz / 2, allele, ha='center', va='center',
                fontsize=cfg.font_size_cell, fontweight='bold',
                color=cfg.header_text_color)

    # --------------------------------------------------------
    # [2] 결합 자손 그리드
    # --------------------------------------------------------
    def create_offspring_image(self, table: OffspringTable,
                               save_path: Optional[str] = None) -> str:
        cfg = self.config
        n = max(len(table.cards), 1)
        cols = min(cfg.cards_per_row, n)
        rows = int(np.ceil(n / cols))

        fig, axes = plt.subplots(rows, cols,
                                 figsize=(cols * cfg.card_width, rows * cfg.card_height),
                                 squeeze=False)
        fig.suptitle(table.title, color=cfg.title_color, fontsize=cfg.font_size_title + 2)

        for idx, ax in enumerate(axes.flat):
            ax.axis('off')
            if idx >= len(table.cards):
                continue
            self._draw_card(ax, table.cards[idx])

        return self._finish(fig, save_path)

    def _draw_card(self, ax, card):
        cfg = self.config
        first, second = card.offspring.first, card.offspring.second

        ax.set_xlim(0, 200)
        ax.set_ylim(0, 420)
        ax.add_patch(FancyBboxPatch((4, 4), 192, 412, boxstyle="round,pad=2",
                                    facecolor='white', edgecolor='#dddddd'))

        lines = [
            (f"{first.genotype} ({format_percent(first.probability)})",
             allele_badge_color(first.genotype)),
            (f"{second.genotype} ({format_percent(second.probability)})",
             allele_badge_color(second.genotype)),
        ]
        for k, (text, color) in enumerate(lines):
            ax.text(100, 400 - k * 22, text, ha='center', va='top', fontsize=9,
                    color='white', fontweight='bold',
                    bbox=dict(boxstyle='round', facecolor=color, edgecolor='none'))
        ax.text(100, 348, f"{first.phenotype} + {second.phenotype}",
                ha='center', va='top', fontsize=8)

        # 사람 그림은 카드 하단 (y 반전 좌표)
        self._draw_human(ax, first.phenotype, second.phenotype, origin_y=330)

        ax.text(100, 14, f"Joint Probability: {format_percent(card.probability)}",
                ha='center', va='bottom', fontsize=9, color='white', fontweight='bold',
                bbox=dict(boxstyle='round', facecolor=cfg.joint_badge_color,
                          edgecolor='none'))

    def _draw_human(self, ax, eye_phenotype: str, hair_phenotype: str, origin_y: float):
        """
        간단한 사람 그림 (200 x 300 좌표계, 위에서 아래로)

        눈: 'Brown Eyes'면 갈색, 아니면 파랑
        머리: 'Curly Hair'면 흔들린 곡선, 아니면 둥근 띠
        """
        cfg = self.config

        def Y(y):
            return origin_y - y

        eye_fill = cfg.brown_eye_color if eye_phenotype == "Brown Eyes" else cfg.blue_eye_color

        # 얼굴
        ax.add_patch(Circle((100, Y(80)), 60, facecolor=cfg.skin_color, edgecolor='black'))

        # 머리카락
        if hair_phenotype == "Curly Hair":
            self._draw_curls(ax, Y)
        else:
            ax.add_patch(FancyBboxPatch((50, Y(50)), 100, 40,
                                        boxstyle="round,pad=0,rounding_size=20",
                                        facecolor=cfg.straight_hair_color,
                                        edgecolor='none'))

        # 눈
        ax.add_patch(Circle((75, Y(70)), 10, facecolor=eye_fill))
        ax.add_patch(Circle((125, Y(70)), 10, facecolor=eye_fill))

        # 몸
        ax.add_patch(FancyBboxPatch((60, Y(260)), 80, 120,
                                    boxstyle="round,pad=0,rounding_size=10",
                                    facecolor=cfg.body_color, edgecolor='black'))

    def _draw_curls(self, ax, Y):
        """곱슬머리: 3차 베지어 곡선 + 무작위 흔들림"""
        cfg = self.config
        t = np.linspace(0, 1, 30)[:, None]

        for i in range(cfg.curl_count):
            off_x = self.rng.uniform(-10, 10)
            off_y = self.rng.uniform(-5, 5)
            p0 = np.array([30 + i * 8 + off_x, 40 + off_y])
            p1 = np.array([40 + i * 10 + off_x, 10 + off_y])
            p2 = np.array([50 + i * 10 + off_x, 50 + off_y])
            p3 = np.array([60 + i * 10 + off_x, 40 + off_y])
            curve = ((1 - t) ** 3 * p0 + 3 * (1 - t) ** 2 * t * p1
                     + 3 * (1 - t) * t ** 2 * p2 + t ** 3 * p3)
            ax.plot(curve[:, 0], Y(curve[:, 1]), color=cfg.curly_hair_color, lw=1.5)

    # --------------------------------------------------------
    # 유틸리티 메서드
    # --------------------------------------------------------
    def _finish(self, fig, save_path: Optional[str]) -> str:
        cfg = self.config
        plt.tight_layout()

        # 파일 저장
        if save_path:
            fig.savefig(save_path, dpi=cfg.dpi, bbox_inches='tight', facecolor='white')

        # 이미지 반환
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=cfg.dpi, bbox_inches='tight', facecolor='white')
        buf.seek(0)
        img_base64 = base64.b64encode(buf.read()).decode('utf-8')
        plt.close(fig)
        return img_base64
