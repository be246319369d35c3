# -*- coding: utf-8 -*-
"""
minefield.grid パッケージ

盤面（グリッド）の構築に関する処理をまとめたサブパッケージです。
- parser.py     : 記号 ↔ セル（トークン）の変換
- coordinate.py : 座標とインデックスの変換、隣接座標の列挙
- builder.py    : トークン列から長方形の Grid を組み立てる
"""
