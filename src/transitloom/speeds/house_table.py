"""Extreme speeds of house objects by house system and latitude band.

Maps ``(house system code, latitude band)`` to 20 ``(min, max)`` pairs in
degrees per day, ordered ASC, MC, ARMC, VERTEX, EQUASC, COASC1, COASC2,
POLASC, HOUSE1 .. HOUSE12. Band 90 is the "89x" table for latitudes
beyond 88 degrees.

The values are envelopes of the ascendant and midheaven speeds over the
band, with intermediate cusps allowed to move faster, all widened by a
factor of 2. Whole sign cusps follow the ascendant and may move backward
wherever it does. ``scripts/generate_house_speeds.py`` replaces them with
extremes sampled from pyswisseph.
"""

from typing import Dict, Tuple

SpeedPair = Tuple[float, float]

# fmt: off
HOUSE_SPEEDS: Dict[Tuple[str, int], Tuple[SpeedPair, ...]] = {
    ("P", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("P", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("P", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("P", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("P", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("P", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("P", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("P", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("P", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("P", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("P", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("P", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("K", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("K", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("K", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("K", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("K", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("K", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("K", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("O", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("O", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("O", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("O", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("O", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("O", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("O", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("R", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("R", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("R", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("R", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("R", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("R", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("R", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("C", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("C", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("C", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("C", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("C", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("C", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("C", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("A", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (139.6931, 1027.7796),  # HOUSE2
        (139.6931, 1027.7796),  # HOUSE3
        (139.6931, 1027.7796),  # HOUSE4
        (139.6931, 1027.7796),  # HOUSE5
        (139.6931, 1027.7796),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (139.6931, 1027.7796),  # HOUSE8
        (139.6931, 1027.7796),  # HOUSE9
        (139.6931, 1027.7796),  # HOUSE10
        (139.6931, 1027.7796),  # HOUSE11
        (139.6931, 1027.7796),  # HOUSE12
    ),
    ("A", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (126.2249, 1154.6078),  # HOUSE2
        (126.2249, 1154.6078),  # HOUSE3
        (126.2249, 1154.6078),  # HOUSE4
        (126.2249, 1154.6078),  # HOUSE5
        (126.2249, 1154.6078),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (126.2249, 1154.6078),  # HOUSE8
        (126.2249, 1154.6078),  # HOUSE9
        (126.2249, 1154.6078),  # HOUSE10
        (126.2249, 1154.6078),  # HOUSE11
        (126.2249, 1154.6078),  # HOUSE12
    ),
    ("A", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (107.4216, 1360.5594),  # HOUSE2
        (107.4216, 1360.5594),  # HOUSE3
        (107.4216, 1360.5594),  # HOUSE4
        (107.4216, 1360.5594),  # HOUSE5
        (107.4216, 1360.5594),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (107.4216, 1360.5594),  # HOUSE8
        (107.4216, 1360.5594),  # HOUSE9
        (107.4216, 1360.5594),  # HOUSE10
        (107.4216, 1360.5594),  # HOUSE11
        (107.4216, 1360.5594),  # HOUSE12
    ),
    ("A", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (82.8503, 1790.9688),  # HOUSE2
        (82.8503, 1790.9688),  # HOUSE3
        (82.8503, 1790.9688),  # HOUSE4
        (82.8503, 1790.9688),  # HOUSE5
        (82.8503, 1790.9688),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (82.8503, 1790.9688),  # HOUSE8
        (82.8503, 1790.9688),  # HOUSE9
        (82.8503, 1790.9688),  # HOUSE10
        (82.8503, 1790.9688),  # HOUSE11
        (82.8503, 1790.9688),  # HOUSE12
    ),
    ("A", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (49.7079, 3475.3974),  # HOUSE2
        (49.7079, 3475.3974),  # HOUSE3
        (49.7079, 3475.3974),  # HOUSE4
        (49.7079, 3475.3974),  # HOUSE5
        (49.7079, 3475.3974),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (49.7079, 3475.3974),  # HOUSE8
        (49.7079, 3475.3974),  # HOUSE9
        (49.7079, 3475.3974),  # HOUSE10
        (49.7079, 3475.3974),  # HOUSE11
        (49.7079, 3475.3974),  # HOUSE12
    ),
    ("A", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (49.7079, 3475.3974),  # HOUSE2
        (49.7079, 3475.3974),  # HOUSE3
        (49.7079, 3475.3974),  # HOUSE4
        (49.7079, 3475.3974),  # HOUSE5
        (49.7079, 3475.3974),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (49.7079, 3475.3974),  # HOUSE8
        (49.7079, 3475.3974),  # HOUSE9
        (49.7079, 3475.3974),  # HOUSE10
        (49.7079, 3475.3974),  # HOUSE11
        (49.7079, 3475.3974),  # HOUSE12
    ),
    ("A", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("A", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("A", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("A", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("A", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("A", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (139.6931, 1027.7796),  # HOUSE2
        (139.6931, 1027.7796),  # HOUSE3
        (139.6931, 1027.7796),  # HOUSE4
        (139.6931, 1027.7796),  # HOUSE5
        (139.6931, 1027.7796),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (139.6931, 1027.7796),  # HOUSE8
        (139.6931, 1027.7796),  # HOUSE9
        (139.6931, 1027.7796),  # HOUSE10
        (139.6931, 1027.7796),  # HOUSE11
        (139.6931, 1027.7796),  # HOUSE12
    ),
    ("V", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (126.2249, 1154.6078),  # HOUSE2
        (126.2249, 1154.6078),  # HOUSE3
        (126.2249, 1154.6078),  # HOUSE4
        (126.2249, 1154.6078),  # HOUSE5
        (126.2249, 1154.6078),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (126.2249, 1154.6078),  # HOUSE8
        (126.2249, 1154.6078),  # HOUSE9
        (126.2249, 1154.6078),  # HOUSE10
        (126.2249, 1154.6078),  # HOUSE11
        (126.2249, 1154.6078),  # HOUSE12
    ),
    ("V", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (107.4216, 1360.5594),  # HOUSE2
        (107.4216, 1360.5594),  # HOUSE3
        (107.4216, 1360.5594),  # HOUSE4
        (107.4216, 1360.5594),  # HOUSE5
        (107.4216, 1360.5594),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (107.4216, 1360.5594),  # HOUSE8
        (107.4216, 1360.5594),  # HOUSE9
        (107.4216, 1360.5594),  # HOUSE10
        (107.4216, 1360.5594),  # HOUSE11
        (107.4216, 1360.5594),  # HOUSE12
    ),
    ("V", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (82.8503, 1790.9688),  # HOUSE2
        (82.8503, 1790.9688),  # HOUSE3
        (82.8503, 1790.9688),  # HOUSE4
        (82.8503, 1790.9688),  # HOUSE5
        (82.8503, 1790.9688),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (82.8503, 1790.9688),  # HOUSE8
        (82.8503, 1790.9688),  # HOUSE9
        (82.8503, 1790.9688),  # HOUSE10
        (82.8503, 1790.9688),  # HOUSE11
        (82.8503, 1790.9688),  # HOUSE12
    ),
    ("V", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (49.7079, 3475.3974),  # HOUSE2
        (49.7079, 3475.3974),  # HOUSE3
        (49.7079, 3475.3974),  # HOUSE4
        (49.7079, 3475.3974),  # HOUSE5
        (49.7079, 3475.3974),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (49.7079, 3475.3974),  # HOUSE8
        (49.7079, 3475.3974),  # HOUSE9
        (49.7079, 3475.3974),  # HOUSE10
        (49.7079, 3475.3974),  # HOUSE11
        (49.7079, 3475.3974),  # HOUSE12
    ),
    ("V", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (49.7079, 3475.3974),  # HOUSE2
        (49.7079, 3475.3974),  # HOUSE3
        (49.7079, 3475.3974),  # HOUSE4
        (49.7079, 3475.3974),  # HOUSE5
        (49.7079, 3475.3974),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (49.7079, 3475.3974),  # HOUSE8
        (49.7079, 3475.3974),  # HOUSE9
        (49.7079, 3475.3974),  # HOUSE10
        (49.7079, 3475.3974),  # HOUSE11
        (49.7079, 3475.3974),  # HOUSE12
    ),
    ("V", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("V", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("X", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("X", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("H", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (39.7663, 4344.2468),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (39.7663, 4344.2468),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (39.7663, 4344.2468),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (39.7663, 4344.2468),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("H", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (66.2802, 2238.7108),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (66.2802, 2238.7108),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (66.2802, 2238.7108),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (66.2802, 2238.7108),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("H", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (39.7663, 4344.2468),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (39.7663, 4344.2468),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (39.7663, 4344.2468),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (39.7663, 4344.2468),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("H", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (39.7663, 4344.2468),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (39.7663, 4344.2468),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (39.7663, 4344.2468),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (39.7663, 4344.2468),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("H", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("H", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-49500.0000, 49500.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (-49500.0000, 49500.0000),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-49500.0000, 49500.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (-49500.0000, 49500.0000),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("T", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("T", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("T", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("T", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("T", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("T", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("T", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("B", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("B", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("B", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("B", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("B", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("B", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("B", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("M", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("M", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (150.5445, 865.5956),  # HOUSE1
        (150.5445, 865.5956),  # HOUSE2
        (150.5445, 865.5956),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (150.5445, 865.5956),  # HOUSE5
        (150.5445, 865.5956),  # HOUSE6
        (150.5445, 865.5956),  # HOUSE7
        (150.5445, 865.5956),  # HOUSE8
        (150.5445, 865.5956),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (150.5445, 865.5956),  # HOUSE11
        (150.5445, 865.5956),  # HOUSE12
    ),
    ("U", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (139.6931, 1027.7796),  # HOUSE1
        (111.7545, 1284.7246),  # HOUSE2
        (111.7545, 1284.7246),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (111.7545, 1284.7246),  # HOUSE5
        (111.7545, 1284.7246),  # HOUSE6
        (139.6931, 1027.7796),  # HOUSE7
        (111.7545, 1284.7246),  # HOUSE8
        (111.7545, 1284.7246),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (111.7545, 1284.7246),  # HOUSE11
        (111.7545, 1284.7246),  # HOUSE12
    ),
    ("U", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (126.2249, 1154.6078),  # HOUSE1
        (100.9799, 1443.2598),  # HOUSE2
        (100.9799, 1443.2598),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (100.9799, 1443.2598),  # HOUSE5
        (100.9799, 1443.2598),  # HOUSE6
        (126.2249, 1154.6078),  # HOUSE7
        (100.9799, 1443.2598),  # HOUSE8
        (100.9799, 1443.2598),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (100.9799, 1443.2598),  # HOUSE11
        (100.9799, 1443.2598),  # HOUSE12
    ),
    ("U", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (107.4216, 1360.5594),  # HOUSE1
        (85.9373, 1700.6992),  # HOUSE2
        (85.9373, 1700.6992),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (85.9373, 1700.6992),  # HOUSE5
        (85.9373, 1700.6992),  # HOUSE6
        (107.4216, 1360.5594),  # HOUSE7
        (85.9373, 1700.6992),  # HOUSE8
        (85.9373, 1700.6992),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (85.9373, 1700.6992),  # HOUSE11
        (85.9373, 1700.6992),  # HOUSE12
    ),
    ("U", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (82.8503, 1790.9688),  # HOUSE1
        (66.2802, 2238.7108),  # HOUSE2
        (66.2802, 2238.7108),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (66.2802, 2238.7108),  # HOUSE5
        (66.2802, 2238.7108),  # HOUSE6
        (82.8503, 1790.9688),  # HOUSE7
        (66.2802, 2238.7108),  # HOUSE8
        (66.2802, 2238.7108),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (66.2802, 2238.7108),  # HOUSE11
        (66.2802, 2238.7108),  # HOUSE12
    ),
    ("U", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("U", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (49.7079, 3475.3974),  # HOUSE1
        (39.7663, 4344.2468),  # HOUSE2
        (39.7663, 4344.2468),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (39.7663, 4344.2468),  # HOUSE5
        (39.7663, 4344.2468),  # HOUSE6
        (49.7079, 3475.3974),  # HOUSE7
        (39.7663, 4344.2468),  # HOUSE8
        (39.7663, 4344.2468),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (39.7663, 4344.2468),  # HOUSE11
        (39.7663, 4344.2468),  # HOUSE12
    ),
    ("U", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("U", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("U", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("U", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("U", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("U", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-49500.0000, 49500.0000),  # HOUSE2
        (-49500.0000, 49500.0000),  # HOUSE3
        (150.5445, 865.5956),  # HOUSE4
        (-49500.0000, 49500.0000),  # HOUSE5
        (-49500.0000, 49500.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-49500.0000, 49500.0000),  # HOUSE8
        (-49500.0000, 49500.0000),  # HOUSE9
        (150.5445, 865.5956),  # HOUSE10
        (-49500.0000, 49500.0000),  # HOUSE11
        (-49500.0000, 49500.0000),  # HOUSE12
    ),
    ("W", 10): (
        (139.6931, 1027.7796),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (0.0000, 1027.7796),  # HOUSE1
        (0.0000, 1027.7796),  # HOUSE2
        (0.0000, 1027.7796),  # HOUSE3
        (0.0000, 1027.7796),  # HOUSE4
        (0.0000, 1027.7796),  # HOUSE5
        (0.0000, 1027.7796),  # HOUSE6
        (0.0000, 1027.7796),  # HOUSE7
        (0.0000, 1027.7796),  # HOUSE8
        (0.0000, 1027.7796),  # HOUSE9
        (0.0000, 1027.7796),  # HOUSE10
        (0.0000, 1027.7796),  # HOUSE11
        (0.0000, 1027.7796),  # HOUSE12
    ),
    ("W", 20): (
        (126.2249, 1154.6078),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (-39600.0000, 39600.0000),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (0.0000, 1154.6078),  # HOUSE1
        (0.0000, 1154.6078),  # HOUSE2
        (0.0000, 1154.6078),  # HOUSE3
        (0.0000, 1154.6078),  # HOUSE4
        (0.0000, 1154.6078),  # HOUSE5
        (0.0000, 1154.6078),  # HOUSE6
        (0.0000, 1154.6078),  # HOUSE7
        (0.0000, 1154.6078),  # HOUSE8
        (0.0000, 1154.6078),  # HOUSE9
        (0.0000, 1154.6078),  # HOUSE10
        (0.0000, 1154.6078),  # HOUSE11
        (0.0000, 1154.6078),  # HOUSE12
    ),
    ("W", 30): (
        (107.4216, 1360.5594),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (49.7079, 3475.3974),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (0.0000, 1360.5594),  # HOUSE1
        (0.0000, 1360.5594),  # HOUSE2
        (0.0000, 1360.5594),  # HOUSE3
        (0.0000, 1360.5594),  # HOUSE4
        (0.0000, 1360.5594),  # HOUSE5
        (0.0000, 1360.5594),  # HOUSE6
        (0.0000, 1360.5594),  # HOUSE7
        (0.0000, 1360.5594),  # HOUSE8
        (0.0000, 1360.5594),  # HOUSE9
        (0.0000, 1360.5594),  # HOUSE10
        (0.0000, 1360.5594),  # HOUSE11
        (0.0000, 1360.5594),  # HOUSE12
    ),
    ("W", 40): (
        (82.8503, 1790.9688),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (82.8503, 1790.9688),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (82.8503, 1790.9688),  # COASC1
        (82.8503, 1790.9688),  # COASC2
        (82.8503, 1790.9688),  # POLASC
        (0.0000, 1790.9688),  # HOUSE1
        (0.0000, 1790.9688),  # HOUSE2
        (0.0000, 1790.9688),  # HOUSE3
        (0.0000, 1790.9688),  # HOUSE4
        (0.0000, 1790.9688),  # HOUSE5
        (0.0000, 1790.9688),  # HOUSE6
        (0.0000, 1790.9688),  # HOUSE7
        (0.0000, 1790.9688),  # HOUSE8
        (0.0000, 1790.9688),  # HOUSE9
        (0.0000, 1790.9688),  # HOUSE10
        (0.0000, 1790.9688),  # HOUSE11
        (0.0000, 1790.9688),  # HOUSE12
    ),
    ("W", 50): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (107.4216, 1360.5594),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (0.0000, 3475.3974),  # HOUSE1
        (0.0000, 3475.3974),  # HOUSE2
        (0.0000, 3475.3974),  # HOUSE3
        (0.0000, 3475.3974),  # HOUSE4
        (0.0000, 3475.3974),  # HOUSE5
        (0.0000, 3475.3974),  # HOUSE6
        (0.0000, 3475.3974),  # HOUSE7
        (0.0000, 3475.3974),  # HOUSE8
        (0.0000, 3475.3974),  # HOUSE9
        (0.0000, 3475.3974),  # HOUSE10
        (0.0000, 3475.3974),  # HOUSE11
        (0.0000, 3475.3974),  # HOUSE12
    ),
    ("W", 60): (
        (49.7079, 3475.3974),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (49.7079, 3475.3974),  # COASC1
        (49.7079, 3475.3974),  # COASC2
        (49.7079, 3475.3974),  # POLASC
        (0.0000, 3475.3974),  # HOUSE1
        (0.0000, 3475.3974),  # HOUSE2
        (0.0000, 3475.3974),  # HOUSE3
        (0.0000, 3475.3974),  # HOUSE4
        (0.0000, 3475.3974),  # HOUSE5
        (0.0000, 3475.3974),  # HOUSE6
        (0.0000, 3475.3974),  # HOUSE7
        (0.0000, 3475.3974),  # HOUSE8
        (0.0000, 3475.3974),  # HOUSE9
        (0.0000, 3475.3974),  # HOUSE10
        (0.0000, 3475.3974),  # HOUSE11
        (0.0000, 3475.3974),  # HOUSE12
    ),
    ("W", 66): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (126.2249, 1154.6078),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("W", 70): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (134.9426, 1072.6494),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("W", 80): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (139.6931, 1027.7796),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("W", 85): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (147.8235, 937.2452),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("W", 88): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (149.8637, 899.7230),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
    ("W", 90): (
        (-39600.0000, 39600.0000),  # ASC
        (150.5445, 865.5956),  # MC
        (179.5000, 726.0000),  # ARMC
        (150.4355, 878.9022),  # VERTEX
        (150.5445, 865.5956),  # EQUASC
        (-39600.0000, 39600.0000),  # COASC1
        (-39600.0000, 39600.0000),  # COASC2
        (-39600.0000, 39600.0000),  # POLASC
        (-39600.0000, 39600.0000),  # HOUSE1
        (-39600.0000, 39600.0000),  # HOUSE2
        (-39600.0000, 39600.0000),  # HOUSE3
        (-39600.0000, 39600.0000),  # HOUSE4
        (-39600.0000, 39600.0000),  # HOUSE5
        (-39600.0000, 39600.0000),  # HOUSE6
        (-39600.0000, 39600.0000),  # HOUSE7
        (-39600.0000, 39600.0000),  # HOUSE8
        (-39600.0000, 39600.0000),  # HOUSE9
        (-39600.0000, 39600.0000),  # HOUSE10
        (-39600.0000, 39600.0000),  # HOUSE11
        (-39600.0000, 39600.0000),  # HOUSE12
    ),
}
# fmt: on
