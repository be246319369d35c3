# -*- coding: utf-8 -*-
"""
minefield.counting パッケージ

- mine_counter.py : 空きマスごとに周囲の地雷を数え、解答済みの Grid を作る
"""
