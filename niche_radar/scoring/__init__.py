"""
Results pipeline: converts a complete SelectionSet into an AssessmentReport.

Modules
-------
engine     : score_selection() + the individual pure rules
             (threat score, asymmetry, threat level, density, colour band).
narrative  : build_narrative() — analysis + recommendation paragraphs.
consortium : match_consortium() — three partner archetypes per specialization.
heatmap    : build_heatmap() — static Big 4 service intensity.
assessment : build_assessment() — runs all of the above.
"""
