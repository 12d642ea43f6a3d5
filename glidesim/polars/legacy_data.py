"""
Tabulated legacy polars: (cl, cd) stall points, angle-of-attack grids,
indexes and center-of-pressure tables. Angles in degrees, descending.
"""

# Aura 5 wingsuit

AURAFIVE_STALLPOINT = [
    (0.108983764628346, 1.08733),
    (0.185891612981445, 1.07550125),
    (0.210159022016888, 1.04624),
    (0.236338092608918, 1.00421875),
    (0.276174302741996, 0.95411),
    (0.321902830713497, 0.90058625),
    (0.363958657340666, 0.848320000000001),
    (0.400686482484531, 0.80198375),
    (0.443431551630603, 0.77),
    (0.501784571242392, 0.741),
    (0.516614859906805, 0.735),
    (0.533624176122725, 0.73),
    (0.548480181747974, 0.72),
    (0.564801482459875, 0.71),
    (0.582677701039275, 0.7),
    (0.602181355660182, 0.69),
    (0.623365404678184, 0.68),
    (0.646260864379027, 0.67),
    (0.670874519347125, 0.66),
    (0.70576750505298, 0.658),
    (0.759140843806183, 0.67),
    (0.810986085509315, 0.677),
    (0.88072260117917, 0.695),
    (0.965501597206807, 0.72),
    (1.05011755421627, 0.74),
    (1.1371, 0.747538425047438),
    (1.15574082635108, 0.715249918087947),
    (1.15539526148586, 0.674507873388006),
    (1.14683928171753, 0.630877095494163),
    (1.11365205723984, 0.578580118018614),
    (1.08461323582186, 0.532820262727508),
    (1.03921292555216, 0.485724926151704),
    (0.973302723371025, 0.430756986106757),
    (0.907945945116896, 0.377696088274903),
    (0.855618188821683, 0.343913198706244),
    (0.805163095460971, 0.313424543901754),
    (0.761810592507725, 0.288863037567478),
    (0.719519027870984, 0.266359012152287),
    (0.677227463234242, 0.245293347914775),
    (0.642590319337377, 0.229111816346851),
    (0.601309850277438, 0.211086840529111),
    (0.568285475029486, 0.197653553200295),
    (0.510492818345571, 0.176255727765257),
    (0.483132714445128, 0.167062404747948),
    (0.461436881892194, 0.160200300064325),
    (0.418045216786326, 0.147611714122478),
    (0.385501467956925, 0.139163945163318),
    (0.342109802851057, 0.129225147214071),
    (0.298718137745189, 0.120800513832024),
    (0.249388066223454, 0.11306209742444),
    (0.207936707770252, 0.108072711176012),
    (0.15266822983265, 0.103569627182967),
    (0.0835826324106472, 0.101395214878043),
    (0.0144970349886442, 0.103059072224655)
]

AURAFIVE_AOAS = [
    90, 85, 80, 75, 70, 65, 60, 55, 50, 45,
    44, 43, 42, 41, 40, 39, 38, 37, 36, 35,
    34, 33, 32, 31, 30, 28, 27, 26, 25, 24,
    23, 22, 21, 20, 19, 18, 17, 16, 15, 14,
    13, 12, 11, 10, 9, 8, 7, 6, 5, 4,
    3, 2, 1, 0
]

AURAFIVE_AOA_INDEXES = [
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0,
    0.0973293002538006, 0.111603420554605, 0.126644343855929,
    0.142952948209109, 0.157392756917588, 0.176072473739675,
    0.192339895747025, 0.224200774751407, 0.241070606343121,
    0.255406594180041, 0.28703753161202, 0.313823164024654,
    0.354610522808676, 0.40272129228758, 0.469227952116029,
    0.538110242647231, 0.654985426264267, 0.846649581714156, 1
]

AURAFIVE_CP = [
    0.901367256532332, 0.819922671799767, 0.81865591174113,
    0.817549210804472, 0.807584803437846, 0.7877449240893,
    0.759011807206887, 0.722367687238658, 0.678794798632662,
    0.629275375836952, 0.618744343806472, 0.608022597661911,
    0.597117995278852, 0.586038394532879, 0.574791653299577,
    0.563385629454531, 0.551828180873325, 0.540127165431543,
    0.52829044100477, 0.51632586546859, 0.504241296698587,
    0.492044592570347, 0.481452630223225, 0.475420516158898,
    0.469421112816359, 0.457459576274893, 0.451502244326367,
    0.445584032972467, 0.439735391686759, 0.433995116116988,
    0.428408751771098, 0.423026997703251, 0.417904110199851,
    0.413096306465556, 0.408660168309301, 0.40465104583032,
    0.40112146110416, 0.398119511868704, 0.395687275210186,
    0.393859211249218, 0.392660566826802, 0.39210577919035,
    0.392196879679709, 0.392921897413175, 0.394253262973511,
    0.396146212093973, 0.398537189344323, 0.401342251816851,
    0.404455472812395, 0.407747345526357, 0.411063186734725,
    0.414221540480093, 0.417012581757679, 0.419196520201342
]

# Ibex UL canopy

IBEX_AOAS = [
    90, 85, 80, 75, 70, 65, 60, 55, 50, 45, 40, 35,
    30, 25, 20, 15, 10, 5, 0
]

IBEX_AOA_INDEXES = [
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0.0328, 0.090625, 0.1792, 0.306475, 0.4804, 0.708925, 1
]

IBEX_CP = [
    0.05, 0.068, 0.068, 0.10400122, 0.140400122, 0.18,
    0.208196156, 0.239263709, 0.269097808, 0.298321118,
    0.327483484, 0.35314334, 0.37330676, 0.384385535,
    0.396690654, 0.400570261, 0.401, 0.401, 0.401
]

IBEX_STALLPOINT = [
    (0, 1),
    (0.03, 0.99),
    (0.07, 0.98),
    (0.15, 0.953),
    (0.2, 0.925),
    (0.4, 0.9),
    (0.6, 0.84),
    (0.75, 0.78),
    (0.87, 0.7),
    (0.95, 0.6),
    (1, 0.49),
    (1.12006886897915, 0.479960463043889),
    (0.904260055464565, 0.270848614164216),
    (0.737065417620883, 0.17123242286816),
    (0.607025143742464, 0.131412108918551),
    (0.524831448174596, 0.123239034936943),
    (0.459344707642397, 0.126149760622165),
    (0.395071314200648, 0.137132297109999),
    (0.356507278135599, 0.147585703712626)
]

# Slick Sin, full 360 deg skydiver

SLICKSIN_AOAS = [
    180, 175, 170, 165, 160, 155, 150, 145, 140, 135,
    130, 125, 120, 115, 110, 105, 100, 95, 90, 85,
    80, 75, 70, 65, 60, 55, 50, 45, 40, 35,
    30, 25, 20, 15, 10, 5, 0,
    -5, -10, -15, -20, -25, -30, -35, -40, -45,
    -50, -55, -60, -65, -70, -75, -80, -85, -90,
    -95, -100, -105, -110, -115, -120, -125, -130, -135,
    -140, -145, -150, -155, -160, -165, -170, -175, -180
]

SLICKSIN_CP = [
    0.403, 0.393, 0.393, 0.395, 0.395, 0.395, 0.397, 0.397,
    0.3975, 0.4, 0.404, 0.405, 0.405, 0.4, 0.4, 0.4,
    0.396, 0.3951, 0.395, 0.3951, 0.396, 0.4, 0.405, 0.405,
    0.405, 0.404, 0.404, 0.4, 0.3975, 0.397, 0.395, 0.395,
    0.393, 0.393, 0.393, 0.403, 0.403,
    0.393, 0.393, 0.395, 0.395, 0.395, 0.397, 0.397,
    0.3975, 0.4, 0.404, 0.405, 0.405, 0.4, 0.4, 0.4,
    0.396, 0.3951, 0.395, 0.3951, 0.396, 0.4, 0.405, 0.405,
    0.405, 0.404, 0.404, 0.4, 0.3975, 0.397, 0.395, 0.395,
    0.393, 0.393, 0.393, 0.403, 0.403
]

SLICKSIN_STALLPOINT = [
    (0, 0.466661416322842),
    (-0.125342322477473, 0.474546662056603),
    (-0.246876181912743, 0.497962810056395),
    (-0.36090883348597, 0.536198372514386),
    (-0.463975452782408, 0.588091581213417),
    (-0.55294441272896, 0.6520656872664),
    (-0.625112436498116, 0.726176869833375),
    (-0.678286735206433, 0.808173298134111),
    (-0.710851634695151, 0.895563552186886),
    (-0.72181766697194, 0.985692323343908),
    (-0.710851634695151, 1.07582109450093),
    (-0.678286735206433, 1.1632113485537),
    (-0.625112436498116, 1.24520777685444),
    (-0.55294441272896, 1.31931895942141),
    (-0.463975452782408, 1.3832930654744),
    (-0.36090883348597, 1.43518627417343),
    (-0.246876181912743, 1.47342183663142),
    (-0.125342322477473, 1.49683798463121),
    (0, 1.50472323036497),
    (0.125342322477473, 1.49683798463121),
    (0.246876181912743, 1.47342183663142),
    (0.36090883348597, 1.43518627417343),
    (0.463975452782408, 1.3832930654744),
    (0.55294441272896, 1.31931895942141),
    (0.625112436498116, 1.24520777685444),
    (0.678286735206433, 1.1632113485537),
    (0.710851634695151, 1.07582109450093),
    (0.72181766697194, 0.985692323343908),
    (0.710851634695151, 0.895563552186885),
    (0.678286735206433, 0.808173298134111),
    (0.625112436498116, 0.726176869833375),
    (0.55294441272896, 0.6520656872664),
    (0.463975452782408, 0.588091581213417),
    (0.36090883348597, 0.536198372514386),
    (0.246876181912743, 0.497962810056395),
    (0.125342322477473, 0.474546662056603),
    (0, 0.466661416322842),
    (-0.125342322477473, 0.474546662056603),
    (-0.246876181912743, 0.497962810056395),
    (-0.36090883348597, 0.536198372514386),
    (-0.463975452782408, 0.588091581213417),
    (-0.55294441272896, 0.6520656872664),
    (-0.625112436498116, 0.726176869833375),
    (-0.678286735206433, 0.808173298134111),
    (-0.710851634695151, 0.895563552186885),
    (-0.72181766697194, 0.985692323343908),
    (-0.710851634695151, 1.07582109450093),
    (-0.678286735206433, 1.1632113485537),
    (-0.625112436498116, 1.24520777685444),
    (-0.55294441272896, 1.31931895942141),
    (-0.463975452782408, 1.3832930654744),
    (-0.36090883348597, 1.43518627417343),
    (-0.246876181912743, 1.47342183663142),
    (-0.125342322477473, 1.49683798463121),
    (0, 1.50472323036497),
    (0.125342322477473, 1.49683798463121),
    (0.246876181912743, 1.47342183663142),
    (0.36090883348597, 1.43518627417343),
    (0.463975452782408, 1.3832930654744),
    (0.55294441272896, 1.31931895942141),
    (0.625112436498116, 1.24520777685444),
    (0.678286735206433, 1.1632113485537),
    (0.710851634695151, 1.07582109450093),
    (0.72181766697194, 0.985692323343908),
    (0.710851634695151, 0.895563552186886),
    (0.678286735206433, 0.808173298134111),
    (0.625112436498116, 0.726176869833375),
    (0.55294441272896, 0.6520656872664),
    (0.463975452782408, 0.588091581213417),
    (0.36090883348597, 0.536198372514386),
    (0.246876181912743, 0.497962810056395),
    (0.125342322477473, 0.474546662056603),
    (0, 0.466661416322842)
]

SLICKSIN_AOA_INDEXES = [
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, -1, -1, -1, -1,
    -1, -1, -1, -1, -1, -1, 0,
    0.00110666390772831, 0.00451870714716121, 0.0105095641391427,
    0.0195275224287945, 0.0321897909314248, 0.0492831790191334,
    0.0717777672819191, 0.10085949963318, 0.137986666884966,
    0.184972941986842, 0.244091712181965, 0.318168836871283,
    0.410540168081197, 0.52446808023432, 0.66081492664257,
    0.8111231335412, 0.943756264947077, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1
]

# Caravan airplane

CARAVAN_STALLPOINT = [
    (0.5165430339613966, 0.07239915450672128),
    (0.5029615742827824, 0.06856977008347245),
    (0.48909280298470004, 0.06484394502252835),
    (0.4750908507796766, 0.061271536767406556),
    (0.4610754308424907, 0.057886066498164815),
    (0.4471333352248565, 0.05470728148458934),
    (0.4333274133435328, 0.0517452695322978),
    (0.41969806839500734, 0.049002425136722746),
    (0.4062692430142357, 0.04647609581822054),
    (0.3930484192746416, 0.04415971164565156),
    (0.38003709359090987, 0.04204550705082559),
    (0.36722179823087775, 0.04012361672672921),
    (0.3545845762183286, 0.03838437149203297),
    (0.3421014849183067, 0.03681836636083074),
    (0.32973511396369376, 0.035415985741904646),
    (0.3264993358665586, 0.03507351540292367),
    (0.320631060334466, 0.0344783263126852),
    (0.3131757453331217, 0.03377032919142504),
    (0.3045275799315623, 0.033016570298433676),
    (0.29490936664706946, 0.032263440513521396),
    (0.2844667840486348, 0.03154732238772506),
    (0.2732820976811008, 0.0308975866998465),
    (0.26138787098930094, 0.030339716736794725),
    (0.2487755346456475, 0.029898014037618752),
    (0.2353911018863376, 0.02959796306706299),
    (0.2211283130492831, 0.029469395833047238)
]

CARAVAN_AOAS = [
    22.36810391019099, 21.567190131214463, 20.729470861641637, 19.860973542790497,
    18.967725615979003, 18.05575452252515, 17.1310877037469, 16.19975260096224,
    15.26777665548914, 14.341187308645575, 13.426012001749525, 12.528278176118965,
    11.654013273071874, 10.80924473392623, 10.0, 9.785974631870534,
    9.467852456626332, 9.057880157457355, 8.56830441755358, 8.01137192010497,
    7.399329348301502, 6.744423385333139, 6.0589007143898534, 5.3550080186616125,
    4.6449919813383875, 3.9410992856101466
]

CARAVAN_AOA_INDEXES = [
    0.0, 0.02584602497910915, 0.053301270010354784, 0.08218863382357977,
    0.11236860646815716, 0.1437442946215568, 0.1762504260046479, 0.20985801470475363,
    0.24456823497549784, 0.2804204781487116, 0.317471640678638, 0.3558278038437417,
    0.39562264208757336, 0.4370284024706963, 0.4802914063472369, 0.4920061469263761,
    0.5136918185308401, 0.5420960052078937, 0.5763116866183347, 0.6160756702196375,
    0.6614521303382338, 0.7128304814119495, 0.7709396415189791, 0.8369059462954722,
    0.912418437241464, 1.0
]

CARAVAN_CP = [
    0.4335454619403396, 0.4284531235418372, 0.4236779013904263, 0.4188763601209258,
    0.4143865383474914, 0.4102030860729039, 0.40628949904819345, 0.4028445250043731,
    0.3998956488561748, 0.3973856426552619, 0.3953531619560726, 0.3938154127962302,
    0.3927671705523868, 0.39217975945246836, 0.392, 0.39207465760524074,
    0.3922971560793683, 0.39265308013347633, 0.3931222361454322, 0.3936827701332322,
    0.39431233556641687, 0.39498855347245937, 0.3956891653622101, 0.39639032113568795,
    0.39707193465821666, 0.39771407549294413
]

