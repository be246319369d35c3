# -*- coding: utf-8 -*-
"""
minefield.postprocess パッケージ

- render_result.py : 解答済み盤面をテキストや表示用の dict に変換する
"""
