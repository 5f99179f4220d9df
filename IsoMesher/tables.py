"""
Marching Cubes Case Tables
==========================

Fixed combinatorial data of the marching cubes algorithm (Lorensen & Cline,
in the corner and edge numbering popularised by Paul Bourke).

Corner numbering::

          7 ---------- 6
         /|           /|
        / |          / |
       4 ---------- 5  |
       |  3 --------|- 2
       | /          | /
       |/           |/
       0 ---------- 1

    x: 0 -> 1, y: 0 -> 3, z: 0 -> 4

A case index has bit ``i`` set iff corner ``i`` is inside the surface.
``CASE_TO_EDGES[case]`` lists the triangles of that case, each triangle given
as three edge indices into ``CUBE_EDGES``. Triangles are wound counter
clockwise when seen from outside, so ``cross(b - a, c - a)`` points out of the
inside region. Bourke's table sets a bit for corners *below* the iso level;
with the inside convention used here every triple is stored in reverse
winding.
"""

CUBE_CORNERS = (
    (0, 0, 0),
    (1, 0, 0),
    (1, 1, 0),
    (0, 1, 0),
    (0, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
    (0, 1, 1),
)

CUBE_EDGES = (
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
)

N_CASES = 256

# fmt: off
CASE_TO_EDGES = (
    (),  # 0
    ((0, 3, 8),),  # 1
    ((0, 9, 1),),  # 2
    ((1, 3, 8), (9, 1, 8)),  # 3
    ((1, 10, 2),),  # 4
    ((0, 3, 8), (1, 10, 2)),  # 5
    ((9, 10, 2), (0, 9, 2)),  # 6
    ((2, 3, 8), (2, 8, 10), (10, 8, 9)),  # 7
    ((3, 2, 11),),  # 8
    ((0, 2, 11), (8, 0, 11)),  # 9
    ((1, 0, 9), (2, 11, 3)),  # 10
    ((1, 2, 11), (1, 11, 9), (9, 11, 8)),  # 11
    ((3, 1, 10), (11, 3, 10)),  # 12
    ((0, 1, 10), (0, 10, 8), (8, 10, 11)),  # 13
    ((3, 0, 9), (3, 9, 11), (11, 9, 10)),  # 14
    ((9, 10, 8), (10, 11, 8)),  # 15
    ((4, 8, 7),),  # 16
    ((4, 0, 3), (7, 4, 3)),  # 17
    ((0, 9, 1), (8, 7, 4)),  # 18
    ((4, 9, 1), (4, 1, 7), (7, 1, 3)),  # 19
    ((1, 10, 2), (8, 7, 4)),  # 20
    ((3, 7, 4), (3, 4, 0), (1, 10, 2)),  # 21
    ((9, 10, 2), (9, 2, 0), (8, 7, 4)),  # 22
    ((2, 9, 10), (2, 7, 9), (2, 3, 7), (7, 4, 9)),  # 23
    ((8, 7, 4), (3, 2, 11)),  # 24
    ((11, 7, 4), (11, 4, 2), (2, 4, 0)),  # 25
    ((9, 1, 0), (8, 7, 4), (2, 11, 3)),  # 26
    ((4, 11, 7), (9, 11, 4), (9, 2, 11), (9, 1, 2)),  # 27
    ((3, 1, 10), (3, 10, 11), (7, 4, 8)),  # 28
    ((1, 10, 11), (1, 11, 4), (1, 4, 0), (7, 4, 11)),  # 29
    ((4, 8, 7), (9, 11, 0), (9, 10, 11), (11, 3, 0)),  # 30
    ((4, 11, 7), (4, 9, 11), (9, 10, 11)),  # 31
    ((9, 4, 5),),  # 32
    ((9, 4, 5), (0, 3, 8)),  # 33
    ((0, 4, 5), (1, 0, 5)),  # 34
    ((8, 4, 5), (8, 5, 3), (3, 5, 1)),  # 35
    ((1, 10, 2), (9, 4, 5)),  # 36
    ((3, 8, 0), (1, 10, 2), (4, 5, 9)),  # 37
    ((5, 10, 2), (5, 2, 4), (4, 2, 0)),  # 38
    ((2, 5, 10), (3, 5, 2), (3, 4, 5), (3, 8, 4)),  # 39
    ((9, 4, 5), (2, 11, 3)),  # 40
    ((0, 2, 11), (0, 11, 8), (4, 5, 9)),  # 41
    ((0, 4, 5), (0, 5, 1), (2, 11, 3)),  # 42
    ((2, 5, 1), (2, 8, 5), (2, 11, 8), (4, 5, 8)),  # 43
    ((10, 11, 3), (10, 3, 1), (9, 4, 5)),  # 44
    ((4, 5, 9), (0, 1, 8), (8, 1, 10), (8, 10, 11)),  # 45
    ((5, 0, 4), (5, 11, 0), (5, 10, 11), (11, 3, 0)),  # 46
    ((5, 8, 4), (5, 10, 8), (10, 11, 8)),  # 47
    ((9, 8, 7), (5, 9, 7)),  # 48
    ((9, 0, 3), (9, 3, 5), (5, 3, 7)),  # 49
    ((0, 8, 7), (0, 7, 1), (1, 7, 5)),  # 50
    ((1, 3, 5), (3, 7, 5)),  # 51
    ((9, 8, 7), (9, 7, 5), (10, 2, 1)),  # 52
    ((10, 2, 1), (9, 0, 5), (5, 0, 3), (5, 3, 7)),  # 53
    ((8, 2, 0), (8, 5, 2), (8, 7, 5), (10, 2, 5)),  # 54
    ((2, 5, 10), (2, 3, 5), (3, 7, 5)),  # 55
    ((7, 5, 9), (7, 9, 8), (3, 2, 11)),  # 56
    ((9, 7, 5), (9, 2, 7), (9, 0, 2), (2, 11, 7)),  # 57
    ((2, 11, 3), (0, 8, 1), (1, 8, 7), (1, 7, 5)),  # 58
    ((11, 1, 2), (11, 7, 1), (7, 5, 1)),  # 59
    ((9, 8, 5), (8, 7, 5), (10, 3, 1), (10, 11, 3)),  # 60
    ((5, 0, 7), (5, 9, 0), (7, 0, 11), (1, 10, 0), (11, 0, 10)),  # 61
    ((11, 0, 10), (11, 3, 0), (10, 0, 5), (8, 7, 0), (5, 0, 7)),  # 62
    ((11, 5, 10), (7, 5, 11)),  # 63
    ((10, 5, 6),),  # 64
    ((0, 3, 8), (5, 6, 10)),  # 65
    ((9, 1, 0), (5, 6, 10)),  # 66
    ((1, 3, 8), (1, 8, 9), (5, 6, 10)),  # 67
    ((1, 5, 6), (2, 1, 6)),  # 68
    ((1, 5, 6), (1, 6, 2), (3, 8, 0)),  # 69
    ((9, 5, 6), (9, 6, 0), (0, 6, 2)),  # 70
    ((5, 8, 9), (5, 2, 8), (5, 6, 2), (3, 8, 2)),  # 71
    ((2, 11, 3), (10, 5, 6)),  # 72
    ((11, 8, 0), (11, 0, 2), (10, 5, 6)),  # 73
    ((0, 9, 1), (2, 11, 3), (5, 6, 10)),  # 74
    ((5, 6, 10), (1, 2, 9), (9, 2, 11), (9, 11, 8)),  # 75
    ((6, 11, 3), (6, 3, 5), (5, 3, 1)),  # 76
    ((0, 11, 8), (0, 5, 11), (0, 1, 5), (5, 6, 11)),  # 77
    ((3, 6, 11), (0, 6, 3), (0, 5, 6), (0, 9, 5)),  # 78
    ((6, 9, 5), (6, 11, 9), (11, 8, 9)),  # 79
    ((5, 6, 10), (4, 8, 7)),  # 80
    ((4, 0, 3), (4, 3, 7), (6, 10, 5)),  # 81
    ((1, 0, 9), (5, 6, 10), (8, 7, 4)),  # 82
    ((10, 5, 6), (1, 7, 9), (1, 3, 7), (7, 4, 9)),  # 83
    ((6, 2, 1), (6, 1, 5), (4, 8, 7)),  # 84
    ((1, 5, 2), (5, 6, 2), (3, 4, 0), (3, 7, 4)),  # 85
    ((8, 7, 4), (9, 5, 0), (0, 5, 6), (0, 6, 2)),  # 86
    ((7, 9, 3), (7, 4, 9), (3, 9, 2), (5, 6, 9), (2, 9, 6)),  # 87
    ((3, 2, 11), (7, 4, 8), (10, 5, 6)),  # 88
    ((5, 6, 10), (4, 2, 7), (4, 0, 2), (2, 11, 7)),  # 89
    ((0, 9, 1), (4, 8, 7), (2, 11, 3), (5, 6, 10)),  # 90
    ((9, 1, 2), (9, 2, 11), (9, 11, 4), (7, 4, 11), (5, 6, 10)),  # 91
    ((8, 7, 4), (3, 5, 11), (3, 1, 5), (5, 6, 11)),  # 92
    ((5, 11, 1), (5, 6, 11), (1, 11, 0), (7, 4, 11), (0, 11, 4)),  # 93
    ((0, 9, 5), (0, 5, 6), (0, 6, 3), (11, 3, 6), (8, 7, 4)),  # 94
    ((6, 9, 5), (6, 11, 9), (4, 9, 7), (7, 9, 11)),  # 95
    ((10, 9, 4), (6, 10, 4)),  # 96
    ((4, 6, 10), (4, 10, 9), (0, 3, 8)),  # 97
    ((10, 1, 0), (10, 0, 6), (6, 0, 4)),  # 98
    ((8, 1, 3), (8, 6, 1), (8, 4, 6), (6, 10, 1)),  # 99
    ((1, 9, 4), (1, 4, 2), (2, 4, 6)),  # 100
    ((3, 8, 0), (1, 9, 2), (2, 9, 4), (2, 4, 6)),  # 101
    ((0, 4, 2), (4, 6, 2)),  # 102
    ((8, 2, 3), (8, 4, 2), (4, 6, 2)),  # 103
    ((10, 9, 4), (10, 4, 6), (11, 3, 2)),  # 104
    ((0, 2, 8), (2, 11, 8), (4, 10, 9), (4, 6, 10)),  # 105
    ((3, 2, 11), (0, 6, 1), (0, 4, 6), (6, 10, 1)),  # 106
    ((6, 1, 4), (6, 10, 1), (4, 1, 8), (2, 11, 1), (8, 1, 11)),  # 107
    ((9, 4, 6), (9, 6, 3), (9, 3, 1), (11, 3, 6)),  # 108
    ((8, 1, 11), (8, 0, 1), (11, 1, 6), (9, 4, 1), (6, 1, 4)),  # 109
    ((3, 6, 11), (3, 0, 6), (0, 4, 6)),  # 110
    ((6, 8, 4), (11, 8, 6)),  # 111
    ((7, 6, 10), (7, 10, 8), (8, 10, 9)),  # 112
    ((0, 3, 7), (0, 7, 10), (0, 10, 9), (6, 10, 7)),  # 113
    ((10, 7, 6), (1, 7, 10), (1, 8, 7), (1, 0, 8)),  # 114
    ((10, 7, 6), (10, 1, 7), (1, 3, 7)),  # 115
    ((1, 6, 2), (1, 8, 6), (1, 9, 8), (8, 7, 6)),  # 116
    ((2, 9, 6), (2, 1, 9), (6, 9, 7), (0, 3, 9), (7, 9, 3)),  # 117
    ((7, 0, 8), (7, 6, 0), (6, 2, 0)),  # 118
    ((7, 2, 3), (6, 2, 7)),  # 119
    ((2, 11, 3), (10, 8, 6), (10, 9, 8), (8, 7, 6)),  # 120
    ((2, 7, 0), (2, 11, 7), (0, 7, 9), (6, 10, 7), (9, 7, 10)),  # 121
    ((1, 0, 8), (1, 8, 7), (1, 7, 10), (6, 10, 7), (2, 11, 3)),  # 122
    ((11, 1, 2), (11, 7, 1), (10, 1, 6), (6, 1, 7)),  # 123
    ((8, 6, 9), (8, 7, 6), (9, 6, 1), (11, 3, 6), (1, 6, 3)),  # 124
    ((0, 1, 9), (11, 7, 6)),  # 125
    ((7, 0, 8), (7, 6, 0), (3, 0, 11), (11, 0, 6)),  # 126
    ((7, 6, 11),),  # 127
    ((7, 11, 6),),  # 128
    ((3, 8, 0), (11, 6, 7)),  # 129
    ((0, 9, 1), (11, 6, 7)),  # 130
    ((8, 9, 1), (8, 1, 3), (11, 6, 7)),  # 131
    ((10, 2, 1), (6, 7, 11)),  # 132
    ((1, 10, 2), (3, 8, 0), (6, 7, 11)),  # 133
    ((2, 0, 9), (2, 9, 10), (6, 7, 11)),  # 134
    ((6, 7, 11), (2, 3, 10), (10, 3, 8), (10, 8, 9)),  # 135
    ((7, 3, 2), (6, 7, 2)),  # 136
    ((7, 8, 0), (7, 0, 6), (6, 0, 2)),  # 137
    ((2, 6, 7), (2, 7, 3), (0, 9, 1)),  # 138
    ((1, 2, 6), (1, 6, 8), (1, 8, 9), (8, 6, 7)),  # 139
    ((10, 6, 7), (10, 7, 1), (1, 7, 3)),  # 140
    ((10, 6, 7), (1, 10, 7), (1, 7, 8), (1, 8, 0)),  # 141
    ((0, 7, 3), (0, 10, 7), (0, 9, 10), (6, 7, 10)),  # 142
    ((7, 10, 6), (7, 8, 10), (8, 9, 10)),  # 143
    ((6, 4, 8), (11, 6, 8)),  # 144
    ((3, 11, 6), (3, 6, 0), (0, 6, 4)),  # 145
    ((8, 11, 6), (8, 6, 4), (9, 1, 0)),  # 146
    ((9, 6, 4), (9, 3, 6), (9, 1, 3), (11, 6, 3)),  # 147
    ((6, 4, 8), (6, 8, 11), (2, 1, 10)),  # 148
    ((1, 10, 2), (3, 11, 0), (0, 11, 6), (0, 6, 4)),  # 149
    ((4, 8, 11), (4, 11, 6), (0, 9, 2), (2, 9, 10)),  # 150
    ((10, 3, 9), (10, 2, 3), (9, 3, 4), (11, 6, 3), (4, 3, 6)),  # 151
    ((8, 3, 2), (8, 2, 4), (4, 2, 6)),  # 152
    ((0, 2, 4), (4, 2, 6)),  # 153
    ((1, 0, 9), (2, 4, 3), (2, 6, 4), (4, 8, 3)),  # 154
    ((1, 4, 9), (1, 2, 4), (2, 6, 4)),  # 155
    ((8, 3, 1), (8, 1, 6), (8, 6, 4), (6, 1, 10)),  # 156
    ((10, 0, 1), (10, 6, 0), (6, 4, 0)),  # 157
    ((4, 3, 6), (4, 8, 3), (6, 3, 10), (0, 9, 3), (10, 3, 9)),  # 158
    ((10, 4, 9), (6, 4, 10)),  # 159
    ((4, 5, 9), (7, 11, 6)),  # 160
    ((0, 3, 8), (4, 5, 9), (11, 6, 7)),  # 161
    ((5, 1, 0), (5, 0, 4), (7, 11, 6)),  # 162
    ((11, 6, 7), (8, 4, 3), (3, 4, 5), (3, 5, 1)),  # 163
    ((9, 4, 5), (10, 2, 1), (7, 11, 6)),  # 164
    ((6, 7, 11), (1, 10, 2), (0, 3, 8), (4, 5, 9)),  # 165
    ((7, 11, 6), (5, 10, 4), (4, 10, 2), (4, 2, 0)),  # 166
    ((3, 8, 4), (3, 4, 5), (3, 5, 2), (10, 2, 5), (11, 6, 7)),  # 167
    ((7, 3, 2), (7, 2, 6), (5, 9, 4)),  # 168
    ((9, 4, 5), (0, 6, 8), (0, 2, 6), (6, 7, 8)),  # 169
    ((3, 2, 6), (3, 6, 7), (1, 0, 5), (5, 0, 4)),  # 170
    ((6, 8, 2), (6, 7, 8), (2, 8, 1), (4, 5, 8), (1, 8, 5)),  # 171
    ((9, 4, 5), (10, 6, 1), (1, 6, 7), (1, 7, 3)),  # 172
    ((1, 10, 6), (1, 6, 7), (1, 7, 0), (8, 0, 7), (9, 4, 5)),  # 173
    ((4, 10, 0), (4, 5, 10), (0, 10, 3), (6, 7, 10), (3, 10, 7)),  # 174
    ((7, 10, 6), (7, 8, 10), (5, 10, 4), (4, 10, 8)),  # 175
    ((6, 5, 9), (6, 9, 11), (11, 9, 8)),  # 176
    ((3, 11, 6), (0, 3, 6), (0, 6, 5), (0, 5, 9)),  # 177
    ((0, 8, 11), (0, 11, 5), (0, 5, 1), (5, 11, 6)),  # 178
    ((6, 3, 11), (6, 5, 3), (5, 1, 3)),  # 179
    ((1, 10, 2), (9, 11, 5), (9, 8, 11), (11, 6, 5)),  # 180
    ((0, 3, 11), (0, 11, 6), (0, 6, 9), (5, 9, 6), (1, 10, 2)),  # 181
    ((11, 5, 8), (11, 6, 5), (8, 5, 0), (10, 2, 5), (0, 5, 2)),  # 182
    ((6, 3, 11), (6, 5, 3), (2, 3, 10), (10, 3, 5)),  # 183
    ((5, 9, 8), (5, 8, 2), (5, 2, 6), (3, 2, 8)),  # 184
    ((9, 6, 5), (9, 0, 6), (0, 2, 6)),  # 185
    ((1, 8, 5), (1, 0, 8), (5, 8, 6), (3, 2, 8), (6, 8, 2)),  # 186
    ((1, 6, 5), (2, 6, 1)),  # 187
    ((1, 6, 3), (1, 10, 6), (3, 6, 8), (5, 9, 6), (8, 6, 9)),  # 188
    ((10, 0, 1), (10, 6, 0), (9, 0, 5), (5, 0, 6)),  # 189
    ((0, 8, 3), (5, 10, 6)),  # 190
    ((10, 6, 5),),  # 191
    ((11, 10, 5), (7, 11, 5)),  # 192
    ((11, 10, 5), (11, 5, 7), (8, 0, 3)),  # 193
    ((5, 7, 11), (5, 11, 10), (1, 0, 9)),  # 194
    ((10, 5, 7), (10, 7, 11), (9, 1, 8), (8, 1, 3)),  # 195
    ((11, 2, 1), (11, 1, 7), (7, 1, 5)),  # 196
    ((0, 3, 8), (1, 7, 2), (1, 5, 7), (7, 11, 2)),  # 197
    ((9, 5, 7), (9, 7, 2), (9, 2, 0), (2, 7, 11)),  # 198
    ((7, 2, 5), (7, 11, 2), (5, 2, 9), (3, 8, 2), (9, 2, 8)),  # 199
    ((2, 10, 5), (2, 5, 3), (3, 5, 7)),  # 200
    ((8, 0, 2), (8, 2, 5), (8, 5, 7), (10, 5, 2)),  # 201
    ((9, 1, 0), (5, 3, 10), (5, 7, 3), (3, 2, 10)),  # 202
    ((9, 2, 8), (9, 1, 2), (8, 2, 7), (10, 5, 2), (7, 2, 5)),  # 203
    ((1, 5, 3), (3, 5, 7)),  # 204
    ((0, 7, 8), (0, 1, 7), (1, 5, 7)),  # 205
    ((9, 3, 0), (9, 5, 3), (5, 7, 3)),  # 206
    ((9, 7, 8), (5, 7, 9)),  # 207
    ((5, 4, 8), (5, 8, 10), (10, 8, 11)),  # 208
    ((5, 4, 0), (5, 0, 11), (5, 11, 10), (11, 0, 3)),  # 209
    ((0, 9, 1), (8, 10, 4), (8, 11, 10), (10, 5, 4)),  # 210
    ((10, 4, 11), (10, 5, 4), (11, 4, 3), (9, 1, 4), (3, 4, 1)),  # 211
    ((2, 1, 5), (2, 5, 8), (2, 8, 11), (4, 8, 5)),  # 212
    ((0, 11, 4), (0, 3, 11), (4, 11, 5), (2, 1, 11), (5, 11, 1)),  # 213
    ((0, 5, 2), (0, 9, 5), (2, 5, 11), (4, 8, 5), (11, 5, 8)),  # 214
    ((9, 5, 4), (2, 3, 11)),  # 215
    ((2, 10, 5), (3, 2, 5), (3, 5, 4), (3, 4, 8)),  # 216
    ((5, 2, 10), (5, 4, 2), (4, 0, 2)),  # 217
    ((3, 2, 10), (3, 10, 5), (3, 5, 8), (4, 8, 5), (0, 9, 1)),  # 218
    ((5, 2, 10), (5, 4, 2), (1, 2, 9), (9, 2, 4)),  # 219
    ((8, 5, 4), (8, 3, 5), (3, 1, 5)),  # 220
    ((0, 5, 4), (1, 5, 0)),  # 221
    ((8, 5, 4), (8, 3, 5), (9, 5, 0), (0, 5, 3)),  # 222
    ((9, 5, 4),),  # 223
    ((4, 7, 11), (4, 11, 9), (9, 11, 10)),  # 224
    ((0, 3, 8), (4, 7, 9), (9, 7, 11), (9, 11, 10)),  # 225
    ((1, 11, 10), (1, 4, 11), (1, 0, 4), (7, 11, 4)),  # 226
    ((3, 4, 1), (3, 8, 4), (1, 4, 10), (7, 11, 4), (10, 4, 11)),  # 227
    ((4, 7, 11), (9, 4, 11), (9, 11, 2), (9, 2, 1)),  # 228
    ((9, 4, 7), (9, 7, 11), (9, 11, 1), (2, 1, 11), (0, 3, 8)),  # 229
    ((11, 4, 7), (11, 2, 4), (2, 0, 4)),  # 230
    ((11, 4, 7), (11, 2, 4), (8, 4, 3), (3, 4, 2)),  # 231
    ((2, 10, 9), (2, 9, 7), (2, 7, 3), (7, 9, 4)),  # 232
    ((9, 7, 10), (9, 4, 7), (10, 7, 2), (8, 0, 7), (2, 7, 0)),  # 233
    ((3, 10, 7), (3, 2, 10), (7, 10, 4), (1, 0, 10), (4, 10, 0)),  # 234
    ((1, 2, 10), (8, 4, 7)),  # 235
    ((4, 1, 9), (4, 7, 1), (7, 3, 1)),  # 236
    ((4, 1, 9), (4, 7, 1), (0, 1, 8), (8, 1, 7)),  # 237
    ((4, 3, 0), (7, 3, 4)),  # 238
    ((4, 7, 8),),  # 239
    ((9, 8, 10), (10, 8, 11)),  # 240
    ((3, 9, 0), (3, 11, 9), (11, 10, 9)),  # 241
    ((0, 10, 1), (0, 8, 10), (8, 11, 10)),  # 242
    ((3, 10, 1), (11, 10, 3)),  # 243
    ((1, 11, 2), (1, 9, 11), (9, 8, 11)),  # 244
    ((3, 9, 0), (3, 11, 9), (1, 9, 2), (2, 9, 11)),  # 245
    ((0, 11, 2), (8, 11, 0)),  # 246
    ((3, 11, 2),),  # 247
    ((2, 8, 3), (2, 10, 8), (10, 9, 8)),  # 248
    ((9, 2, 10), (0, 2, 9)),  # 249
    ((2, 8, 3), (2, 10, 8), (0, 8, 1), (1, 8, 10)),  # 250
    ((1, 2, 10),),  # 251
    ((1, 8, 3), (9, 8, 1)),  # 252
    ((0, 1, 9),),  # 253
    ((0, 8, 3),),  # 254
    (),  # 255
)

CASE_TO_TRIANGLE_COUNT = (
    0, 1, 1, 2, 1, 2, 2, 3, 1, 2, 2, 3, 2, 3, 3, 2,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 2, 3, 4, 4, 3, 3, 4, 4, 3, 4, 5, 5, 2,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 4, 5, 5, 4,
    2, 3, 3, 4, 3, 4, 2, 3, 3, 4, 4, 5, 4, 5, 3, 2,
    3, 4, 4, 3, 4, 5, 3, 2, 4, 5, 5, 4, 5, 2, 4, 1,
    1, 2, 2, 3, 2, 3, 3, 4, 2, 3, 3, 4, 3, 4, 4, 3,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 2, 4, 3, 4, 3, 5, 2,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 4, 5, 5, 4,
    3, 4, 4, 3, 4, 5, 5, 4, 4, 3, 5, 2, 5, 4, 2, 1,
    2, 3, 3, 4, 3, 4, 4, 5, 3, 4, 4, 5, 2, 3, 3, 2,
    3, 4, 4, 5, 4, 5, 5, 2, 4, 3, 5, 4, 3, 2, 4, 1,
    3, 4, 4, 5, 4, 5, 3, 4, 4, 5, 5, 2, 3, 4, 2, 1,
    2, 3, 3, 2, 3, 4, 2, 1, 3, 2, 4, 1, 2, 1, 1, 0,
)
# fmt: on


def _check_case_index(case_index: int):
    if not 0 <= case_index < N_CASES:
        raise ValueError(f"Case index must be in [0, {N_CASES - 1}], got {case_index}")


def triangle_count(case_index: int) -> int:
    """Number of triangles emitted for a case index."""
    _check_case_index(case_index)
    return CASE_TO_TRIANGLE_COUNT[case_index]


def case_triangles(case_index: int) -> tuple[tuple[int, int, int], ...]:
    """Triangles of a case index as triples of edge indices, in table order."""
    _check_case_index(case_index)
    return CASE_TO_EDGES[case_index]


def crossing_edges(case_index: int) -> tuple[int, ...]:
    """
    Edges whose two corners have opposite inside/outside classification
    for the given case index.
    """
    _check_case_index(case_index)
    return tuple(
        edge
        for edge, (a, b) in enumerate(CUBE_EDGES)
        if ((case_index >> a) & 1) != ((case_index >> b) & 1)
    )
