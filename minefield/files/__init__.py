# -*- coding: utf-8 -*-
"""
minefield.files パッケージ

盤面ファイルの読み書きをまとめたサブパッケージです。
- loader.py : テキストファイルを行区切り記号付きの文字列として読み込む
- writer.py : 解答テキストをファイルに書き出す
"""
