"""
modules/catalog/static_catalog.py
----------------------------------
Built-in rugby-heritage catalogue, in wire form.

Used by StaticAttractionSource (ATTRACTION_SOURCE=static, the default) and
by scripts/seed_attractions.py to populate the Postgres `attractions` table.
Image URLs are placeholders until real photography is licensed.
"""

from __future__ import annotations

STATIC_ATTRACTIONS: list[dict] = [
    {
        "id": 1,
        "name": "Newlands Stadium",
        "description": (
            "Newlands, the oldest rugby stadium in South Africa, hosted the "
            "Springboks' first match in 1891."
        ),
        "entranceFee": "R100",
        "directions": "Cape Town, Western Cape",
        "images": [
            "https://via.placeholder.com/150/0000FF/808080?Text=Newlands1",
            "https://via.placeholder.com/150/0000FF/808080?Text=Newlands2",
            "https://via.placeholder.com/150/0000FF/808080?Text=Newlands3",
        ],
        "video": "https://www.youtube.com/embed/sample-video1",
        "coordinates": [-33.9706, 18.4687],
        "type": "historical",
    },
    {
        "id": 2,
        "name": "Ellis Park Stadium",
        "description": (
            "Venue of the iconic 1995 Rugby World Cup final, symbolizing hope "
            "and reconciliation."
        ),
        "entranceFee": "R150",
        "directions": "Johannesburg, Gauteng",
        "images": [
            "https://via.placeholder.com/150/FF0000/FFFFFF?Text=EllisPark1",
            "https://via.placeholder.com/150/FF0000/FFFFFF?Text=EllisPark2",
            "https://via.placeholder.com/150/FF0000/FFFFFF?Text=EllisPark3",
        ],
        "video": "https://www.youtube.com/embed/sample-video2",
        "coordinates": [-26.1979, 28.0625],
        "type": "historical",
    },
    {
        "id": 3,
        "name": "Loftus Versfeld",
        "description": (
            "Home of the Blue Bulls in Pretoria and one of the most atmospheric "
            "test venues in the country."
        ),
        "entranceFee": "R120",
        "directions": "Pretoria, Gauteng",
        "images": [
            "https://via.placeholder.com/150/1E3A8A/FFFFFF?Text=Loftus1",
            "https://via.placeholder.com/150/1E3A8A/FFFFFF?Text=Loftus2",
        ],
        "coordinates": [-25.7532, 28.2228],
        "type": "historical",
    },
    {
        "id": 4,
        "name": "Kings Park Stadium",
        "description": (
            "Durban's rugby fortress, where the Springboks beat France in the "
            "rain-soaked 1995 World Cup semi-final."
        ),
        "entranceFee": "R120",
        "directions": "Durban, KwaZulu-Natal",
        "images": [
            "https://via.placeholder.com/150/000000/FFFFFF?Text=KingsPark1",
        ],
        "coordinates": [-29.8287, 31.0297],
        "type": "historical",
    },
    {
        "id": 5,
        "name": "Springbok Experience Rugby Museum",
        "description": (
            "Interactive museum celebrating Springbok legends, from the first "
            "tours to World Cup-winning captains."
        ),
        "entranceFee": "R90",
        "directions": "V&A Waterfront, Cape Town, Western Cape",
        "images": [
            "https://via.placeholder.com/150/006400/FFD700?Text=Museum1",
            "https://via.placeholder.com/150/006400/FFD700?Text=Museum2",
        ],
        "coordinates": [-33.9036, 18.4211],
        "type": "legend",
    },
    {
        "id": 6,
        "name": "Danie Craven Stadium",
        "description": (
            "Named after 'Mr Rugby' Danie Craven, the Stellenbosch University "
            "ground where generations of Springboks learned the game."
        ),
        "entranceFee": "Free",
        "directions": "Stellenbosch, Western Cape",
        "images": [
            "https://via.placeholder.com/150/8B0000/FFFFFF?Text=Craven1",
        ],
        "coordinates": [-33.9405, 18.8710],
        "type": "legend",
    },
    {
        "id": 7,
        "name": "Faure Street Stadium",
        "description": (
            "Schools rugby in Paarl: the ground where the famous interschools "
            "derby draws crowds bigger than many provincial matches."
        ),
        "entranceFee": "R50",
        "directions": "Paarl, Western Cape",
        "images": [
            "https://via.placeholder.com/150/FFFFFF/000000?Text=Paarl1",
        ],
        "coordinates": [-33.7390, 18.9640],
        "type": "grassroots",
    },
]
