"""Coarse world coastlines as (longitude, latitude) polylines."""

NORTH_AMERICA = [
    (-168, 66), (-162, 70), (-156, 71), (-141, 70), (-128, 70), (-110, 68),
    (-95, 68), (-88, 68), (-82, 66), (-78, 62), (-72, 62), (-64, 60),
    (-61, 56), (-56, 52), (-59, 48), (-65, 45), (-70, 43), (-70, 41),
    (-74, 40), (-76, 37), (-76, 35), (-81, 31), (-80, 27), (-80, 25),
    (-82, 27), (-83, 29), (-85, 30), (-89, 30), (-94, 29), (-97, 27),
    (-97, 22), (-95, 19), (-91, 19), (-90, 21), (-87, 21), (-88, 16),
    (-84, 15), (-83, 11), (-80, 9), (-77, 8), (-80, 7), (-83, 8),
    (-86, 12), (-88, 13), (-92, 15), (-96, 16), (-101, 17), (-105, 20),
    (-106, 23), (-110, 24), (-112, 29), (-110, 23), (-115, 30), (-117, 32),
    (-120, 34), (-122, 37), (-124, 40), (-124, 46), (-124, 48), (-127, 50),
    (-130, 54), (-134, 58), (-140, 60), (-146, 61), (-152, 59), (-158, 57),
    (-164, 55), (-158, 58), (-162, 60), (-165, 62), (-168, 66),
]

HUDSON_BAY = [
    (-95, 60), (-93, 58), (-88, 56), (-82, 55), (-79, 52), (-79, 56),
    (-77, 60), (-80, 63), (-88, 64), (-94, 62), (-95, 60),
]

GREENLAND = [
    (-73, 78), (-60, 82), (-35, 83), (-20, 82), (-18, 77), (-22, 72),
    (-24, 69), (-32, 68), (-40, 65), (-43, 60), (-48, 61), (-52, 65),
    (-54, 69), (-58, 75), (-66, 76), (-73, 78),
]

SOUTH_AMERICA = [
    (-77, 8), (-72, 12), (-64, 11), (-60, 9), (-52, 5), (-50, 0),
    (-44, -2), (-35, -5), (-35, -9), (-39, -14), (-39, -18), (-41, -22),
    (-48, -26), (-49, -29), (-53, -33), (-57, -35), (-58, -38), (-62, -39),
    (-65, -42), (-66, -47), (-69, -51), (-68, -55), (-72, -54), (-75, -50),
    (-74, -43), (-73, -37), (-71, -30), (-70, -18), (-76, -14), (-80, -7),
    (-81, -3), (-80, 1), (-78, 4), (-77, 8),
]

EURASIA = [
    (-9, 37), (-9, 43), (-2, 43), (-1, 46), (-5, 48), (-1, 49), (2, 51),
    (5, 53), (8, 54), (8, 57), (10, 57), (10, 55), (13, 54), (21, 55),
    (21, 57), (24, 59), (28, 60), (22, 60), (21, 63), (25, 65), (22, 66),
    (17, 62), (18, 60), (11, 58), (8, 58), (5, 60), (5, 62), (13, 67),
    (18, 70), (25, 71), (31, 70), (40, 67), (44, 68), (55, 68), (60, 69),
    (68, 69), (73, 72), (80, 73), (88, 75), (100, 77), (105, 78), (113, 74),
    (128, 72), (140, 72), (150, 71), (160, 70), (170, 70), (180, 69),
    (180, 65), (178, 64), (172, 60), (163, 59), (162, 55), (156, 51),
    (156, 57), (160, 61), (153, 59), (142, 59), (136, 55), (141, 53),
    (140, 48), (135, 43), (130, 42), (129, 36), (126, 35), (126, 38),
    (122, 40), (121, 37), (119, 35), (122, 31), (122, 29), (119, 25),
    (114, 22), (110, 21), (106, 20), (109, 16), (109, 12), (105, 9),
    (104, 11), (100, 13), (100, 7), (104, 1), (101, 3), (98, 8), (98, 14),
    (97, 17), (94, 17), (92, 22), (88, 22), (86, 20), (80, 16), (80, 13),
    (78, 8), (76, 10), (73, 16), (72, 21), (67, 25), (62, 25), (57, 26),
    (56, 27), (52, 28), (48, 30), (50, 27), (51, 25), (56, 25), (56, 22),
    (59, 22), (53, 17), (45, 13), (43, 13), (40, 20), (35, 28), (34, 31),
    (35, 36), (27, 37), (26, 40), (29, 41), (34, 42), (41, 41), (41, 44),
    (38, 46), (34, 45), (33, 46), (30, 46), (28, 44), (28, 42), (26, 41),
    (23, 40), (24, 38), (22, 37), (20, 40), (19, 42), (15, 45), (12, 45),
    (14, 42), (16, 40), (16, 38), (15, 40), (12, 42), (10, 44), (7, 44),
    (3, 43), (0, 40), (-1, 37), (-5, 36), (-9, 37),
]

AFRICA = [
    (-6, 36), (10, 37), (11, 33), (20, 31), (25, 32), (32, 31), (34, 28),
    (38, 22), (43, 13), (51, 12), (51, 10), (48, 4), (41, -2), (40, -10),
    (41, -15), (35, -22), (33, -26), (32, -29), (27, -34), (20, -35),
    (18, -32), (15, -27), (12, -18), (13, -12), (9, -1), (10, 3), (6, 4),
    (1, 6), (-5, 5), (-8, 4), (-13, 8), (-17, 14), (-17, 21), (-13, 27),
    (-10, 30), (-6, 36),
]

AUSTRALIA = [
    (114, -22), (114, -26), (115, -34), (118, -35), (124, -34), (131, -31),
    (135, -35), (138, -35), (141, -38), (146, -39), (150, -37), (153, -32),
    (153, -25), (149, -20), (146, -18), (145, -15), (142, -11), (141, -17),
    (136, -15), (137, -12), (131, -11), (127, -14), (122, -17), (114, -22),
]

ISLANDS = [
    # Great Britain, Ireland, Iceland
    [(-5, 50), (1, 51), (2, 53), (0, 54), (-2, 56), (-2, 58), (-5, 59),
     (-6, 57), (-5, 55), (-3, 54), (-3, 53), (-5, 52), (-5, 50)],
    [(-6, 52), (-6, 54), (-8, 55), (-10, 54), (-10, 52), (-6, 52)],
    [(-24, 65), (-22, 66), (-15, 66), (-13, 65), (-18, 63), (-22, 64), (-24, 65)],
    # Japan, Philippines, Sri Lanka
    [(130, 31), (131, 34), (135, 35), (140, 38), (141, 41), (142, 45),
     (145, 44), (141, 42), (141, 36), (139, 35), (136, 34), (133, 33), (130, 31)],
    [(120, 18), (122, 18), (124, 12), (126, 7), (122, 7), (120, 14), (120, 18)],
    [(80, 10), (82, 7), (81, 6), (80, 7), (80, 10)],
    # Sumatra, Java, Borneo, New Guinea
    [(95, 5), (98, 4), (104, -1), (106, -6), (102, -4), (100, 0), (95, 5)],
    [(105, -6), (114, -7), (114, -8), (106, -7), (105, -6)],
    [(109, 2), (116, 7), (119, 5), (118, 1), (116, -4), (110, -3), (109, 2)],
    [(131, -1), (138, -2), (146, -6), (150, -10), (143, -9), (138, -8),
     (132, -4), (131, -1)],
    # Madagascar, New Zealand
    [(49, -12), (50, -16), (47, -25), (44, -24), (44, -17), (49, -12)],
    [(172, -34), (175, -37), (178, -38), (175, -41), (172, -41), (172, -34)],
    [(172, -41), (174, -42), (171, -44), (167, -46), (168, -44), (172, -41)],
]

ANTARCTICA = [
    (-180, -78), (-150, -77), (-140, -75), (-100, -73), (-75, -73),
    (-60, -64), (-57, -63), (-62, -67), (-60, -75), (-35, -78), (-15, -72),
    (0, -70), (30, -69), (60, -67), (90, -66), (120, -66), (150, -68),
    (165, -72), (170, -78), (180, -78),
]

COASTLINES = [
    NORTH_AMERICA,
    HUDSON_BAY,
    GREENLAND,
    SOUTH_AMERICA,
    EURASIA,
    AFRICA,
    AUSTRALIA,
    *ISLANDS,
    ANTARCTICA,
]
