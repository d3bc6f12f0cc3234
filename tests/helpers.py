"""Shared inputs and expected outputs for CLI tests."""

from __future__ import annotations

DATA_0 = "a,b,c\n1,2,3\n4,5,6\n"
JSON_0_H = '{"a":"a","b":"b","c":"c"}\n'
JSON_0_B = '{"a":"1","b":"2","c":"3"}\n{"a":"4","b":"5","c":"6"}\n'
ARR_0_H = '["a","b","c"]\n'
ARR_0_B = '["1","2","3"]\n["4","5","6"]\n'

DATA_1 = "a,b,a\nA,B,C\n"
JSON_1_H = '{"a":"a","b":"b","a":"a"}\n'
JSON_1_B = '{"a":"A","b":"B","a":"C"}\n'
ARR_1_H = '["a","b","a"]\n'
ARR_1_B = '["A","B","C"]\n'

DATA_2 = (
    "date\tevent\n"
    "1995/01/17\tEarthquake\n"
    "2000/01/01\tMillennium\n"
    "2021/07/23\tOlympics\n"
)
JSON_2_H = '{"date":"date","event":"event"}\n'
JSON_2_B = (
    '{"date":"1995/01/17","event":"Earthquake"}\n'
    '{"date":"2000/01/01","event":"Millennium"}\n'
    '{"date":"2021/07/23","event":"Olympics"}\n'
)
ARR_2_H = '["date","event"]\n'
ARR_2_B = (
    '["1995/01/17","Earthquake"]\n'
    '["2000/01/01","Millennium"]\n'
    '["2021/07/23","Olympics"]\n'
)
