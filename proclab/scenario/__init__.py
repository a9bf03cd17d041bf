"""Classification of terrain heights into biomes."""