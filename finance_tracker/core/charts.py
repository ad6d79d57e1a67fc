# finance_tracker/core/charts.py
import io
from typing import Any, Dict, List, Union

import matplotlib
matplotlib.use("Agg")  # servidor sem display
import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

# Configurações globais para os gráficos (cores, fontes, etc.)
plt.style.use('seaborn-v0_8-darkgrid')
plt.rcParams['font.family'] = 'sans-serif'
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

COLORS = {
    'income': '#059669',
    'expense': '#E11D48',
    'balance': '#4F46E5',
}


def _to_png(fig) -> io.BytesIO:
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=200)
    buf.seek(0)
    plt.close(fig)
    return buf


def generate_balance_chart(totals: Dict[str, float]) -> Union[io.BytesIO, None]:
    """Gera o gráfico de barras com ganhos, gastos e saldo."""
    if not totals or (not totals.get('income') and not totals.get('expense')):
        return None

    labels = ['Ganhos', 'Gastos', 'Saldo']
    values = [totals['income'], totals['expense'], totals['balance']]

    fig, ax = plt.subplots(figsize=(8, 6))
    bars = ax.bar(labels, values, color=[COLORS['income'], COLORS['expense'], COLORS['balance']])

    ax.set_title('Resumo: Ganhos vs. Gastos', fontsize=16, fontweight='bold')
    ax.set_ylabel('Valor ($)')
    ax.axhline(0, color='black', linewidth=0.8)
    ax.grid(axis='y', linestyle='--', alpha=0.7)
    ax.bar_label(bars, fmt='$%.2f', fontsize=9, padding=3)
    ax.yaxis.set_major_formatter(mticker.FormatStrFormatter('$%.2f'))

    fig.tight_layout()
    return _to_png(fig)


def generate_category_chart(breakdown: List[Dict[str, Any]]) -> Union[io.BytesIO, None]:
    """Gera o gráfico de rosca dos gastos por categoria, com as cores do cadastro."""
    if not breakdown:
        return None

    names = [item['name'] for item in breakdown]
    values = [item['value'] for item in breakdown]
    colors = [item['color'] for item in breakdown]

    fig, ax = plt.subplots(figsize=(10, 7))
    wedges, _ = ax.pie(
        values,
        colors=colors,
        startangle=90,
        counterclock=False,
        wedgeprops={'width': 0.35, 'edgecolor': 'white'},
    )
    ax.set_title('Gastos por Categoria', fontsize=16, fontweight='bold')
    ax.axis('equal')

    labels = [f"{name}: ${value:.2f}" for name, value in zip(names, values)]
    ax.legend(wedges, labels,
              title="Categoria",
              loc="center left",
              bbox_to_anchor=(1, 0, 0.5, 1))

    fig.tight_layout()
    return _to_png(fig)
