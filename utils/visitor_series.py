"""
Visitor series preparation for the dashboard chart.
"""

import pandas as pd

SERIES_COLUMNS = ['date', 'desktop', 'mobile']


def visitor_frame(rows):
    """
    Build a date-indexed frame from visitor rows ({date, desktop, mobile}).

    Rows are sorted by date; duplicate dates keep the last value.
    """
    if not rows:
        return pd.DataFrame(columns=SERIES_COLUMNS).set_index('date')
    df = pd.DataFrame(rows)
    missing = [c for c in SERIES_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Visitor rows are missing columns: {missing}")
    df = df[SERIES_COLUMNS].copy()
    df['date'] = pd.to_datetime(df['date'], errors='coerce')
    df = df.dropna(subset=['date'])
    df['desktop'] = pd.to_numeric(df['desktop'], errors='coerce').fillna(0).astype(int)
    df['mobile'] = pd.to_numeric(df['mobile'], errors='coerce').fillna(0).astype(int)
    df = df.drop_duplicates(subset='date', keep='last').sort_values('date')
    return df.set_index('date')


def last_n_days(df, days):
    """The most recent `days` rows of the series."""
    if days <= 0:
        return df.iloc[0:0]
    return df.tail(days)


def series_totals(df):
    return {
        'desktop': int(df['desktop'].sum()) if not df.empty else 0,
        'mobile': int(df['mobile'].sum()) if not df.empty else 0,
    }
