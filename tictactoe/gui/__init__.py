"""GUI package: interface graphique H2H avec pygame.

Ce package implémente l'interface utilisateur pour jouer au morpion entre
deux humains sur le même écran. Il ne contient aucune règle de victoire:
il lit `GameState` et transmet les intentions au `GameService`.

Modules:
- geometry: calculs de transformation case logique -> écran
- renderer: rendu de la grille, des marques et de la ligne gagnante
- hud_controller: contrôleur HUD (bandeau de statut, scores)
- app: orchestrateur principal, modèle testable sans boucle pygame
"""

__all__ = [
    "geometry",
    "renderer",
    "hud_controller",
    "app",
]
